# vecn/swizzle.py
"""
Named component access in the style of shader languages.

A swizzle name is built from exactly one of the symbol sets xyzw, rgba or
stpq. Reading ``v.zx`` gathers components 2 and 0 into a new vector, writing
``v.zx = [1, 2]`` scatters the values back into those components.
"""
from typing import Dict

from vecn.exceptions import ComponentTypeError, DimensionMismatchError, DuplicateSwizzleError
from vecn.validation import check_numbers, is_component_sequence, is_number

# Returned by swizzle_get when a single symbol points past the vector.
NOT_HANDLED = object()

def swizzle_get(vector, symbols: str, symbol_set: Dict[str, int]):
    """
    Reads the components named by symbols.

    Returns a float for a single symbol, a new vector of dimension
    len(symbols) otherwise. A multi-symbol swizzle reaching past the vector's
    dimension gives None; a single symbol doing so gives NOT_HANDLED so the
    caller can fall back to ordinary lookup.
    """
    indices = [symbol_set[c] for c in symbols]
    dim = vector.dim

    if len(indices) == 1:
        if indices[0] >= dim:
            return NOT_HANDLED
        return vector[indices[0]]

    if any(i >= dim for i in indices):
        return None
    values = [vector[i] for i in indices]
    return vector.vector_type.registry.get(len(values))(values)

def swizzle_set(vector, symbols: str, symbol_set: Dict[str, int], new_values) -> None:
    """
    Assigns new_values to the components named by symbols, in order.

    Nothing is written unless every check passes. Symbols that are valid but
    beyond the vector's dimension make the whole assignment a no-op.

    Raises:
        ComponentTypeError: a value is not a number, or a multi-symbol
            right-hand side is not a sequence.
        DimensionMismatchError: the right-hand side length differs from len(symbols).
        DuplicateSwizzleError: a symbol is repeated.
    """
    if len(symbols) == 1:
        if not is_number(new_values):
            raise ComponentTypeError("Must set to a number.")
        index = symbol_set[symbols]
        if index < vector.dim:
            vector._assign([(index, float(new_values))])
        return

    if not is_component_sequence(new_values):
        raise ComponentTypeError("Right-hand side must be a sequence.")
    if len(new_values) != len(symbols):
        raise DimensionMismatchError("Right-hand side must have matching length.")
    values = check_numbers(new_values, "All new values must be numbers.")

    indices = [symbol_set[c] for c in symbols]
    if any(i >= vector.dim for i in indices):
        return
    if len(set(symbols)) != len(symbols):
        raise DuplicateSwizzleError("Swizzle assignment does not allow symbols to be repeated.")

    vector._assign(zip(indices, values))
