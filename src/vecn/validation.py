# vecn/validation.py
import enum
import math
import numbers
from collections.abc import Sequence
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from vecn import config
from vecn.exceptions import ComponentTypeError, DimensionMismatchError, InvalidDimension

# Attribute names that describe the shape of a vector. Writes to them are ignored.
SHAPE_ATTRIBUTES = frozenset(("length", "dim", "dimension"))

# Shader-style component names, one dict per synonym set
SYMBOL_SETS = (
    {"x": 0, "y": 1, "z": 2, "w": 3},
    {"r": 0, "g": 1, "b": 2, "a": 3},
    {"s": 0, "t": 1, "p": 2, "q": 3},
)

class KeyKind(enum.Enum):
    """What a key used on a vector refers to."""
    INDEX = "index"
    SWIZZLE = "swizzle"
    SHAPE = "shape"
    OTHER = "other"

def is_number(value: Any) -> bool:
    """
    Returns True for real numbers. Booleans are not numbers here, even though
    Python treats them as integers.
    """
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))

def is_component_sequence(value: Any) -> bool:
    """
    Returns True if value can be read as an ordered run of components
    (lists, tuples, vectors, 1-D numpy arrays). Strings never qualify.
    """
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))

def get_symbol_set(name: Any) -> Optional[Dict[str, int]]:
    """
    Returns the symbol set every character of name belongs to, or None if
    name mixes sets or uses unknown characters.
    """
    if not isinstance(name, str) or not name:
        return None
    for symbol_set in SYMBOL_SETS:
        if all(c in symbol_set for c in name):
            return symbol_set
    return None

def parse_index(key: Any) -> Optional[int]:
    """
    Returns the integer index a key denotes, or None if the key is not
    index-like. Accepts integers and canonical decimal strings ("0", "12",
    but not "01", "-1", "1e3" or " 1").
    """
    if isinstance(key, (bool, np.bool_)):
        return None
    if isinstance(key, numbers.Integral):
        return int(key)
    if isinstance(key, str) and key.isascii() and key.isdigit() and str(int(key)) == key:
        return int(key)
    return None

def classify_key(key: Any, dimension: int) -> Tuple[KeyKind, Any]:
    """
    Resolves a key used for item or attribute access on a vector of the given
    dimension. The payload is the index for INDEX and the symbol set for
    SWIZZLE; it is None otherwise.
    """
    index = parse_index(key)
    if index is not None:
        return KeyKind.INDEX, index
    if not isinstance(key, str):
        return KeyKind.OTHER, None
    if key in SHAPE_ATTRIBUTES:
        return KeyKind.SHAPE, None
    if dimension <= config.SWIZZLE_MAX_DIMENSION:
        symbol_set = get_symbol_set(key)
        if symbol_set is not None:
            return KeyKind.SWIZZLE, symbol_set
    return KeyKind.OTHER, None

def check_dimension(dimension: Any, min_dimension: int = 1) -> int:
    """
    Validates a requested dimension and returns it as an int.

    Raises:
        InvalidDimension: if the value is not an integral number or is below min_dimension.
    """
    if isinstance(dimension, (bool, np.bool_)):
        raise InvalidDimension(f"Dimension must be an integer, got {dimension!r}.")
    if isinstance(dimension, numbers.Integral):
        dim = int(dimension)
    elif isinstance(dimension, numbers.Real):
        as_float = float(dimension)
        if not math.isfinite(as_float) or not as_float.is_integer():
            raise InvalidDimension(f"Dimension must be a finite integer, got {dimension!r}.")
        dim = int(as_float)
    else:
        raise InvalidDimension(f"Dimension must be an integer, got {type(dimension).__name__}.")

    if dim < min_dimension:
        raise InvalidDimension(f"Dimension must be at least {min_dimension}, got {dim}.")
    return dim

def flatten_outer(args: Any) -> Any:
    """
    Strips single-element wrappers. ((1, 2),) becomes (1, 2) and [[[3]]]
    becomes [3]; anything with more than one element is returned as is.
    """
    while is_component_sequence(args) and len(args) == 1 and is_component_sequence(args[0]):
        args = args[0]
    return args

def promote(components: Sequence, dimension: int) -> List[float]:
    """
    Pads components with zeros up to dimension (does not mutate).
    """
    return [float(components[i]) if i < len(components) else 0.0 for i in range(dimension)]

def check_numbers(values: Sequence, message: str = "All components must be numbers.") -> List[float]:
    """
    Converts values to floats, raising ComponentTypeError on the first non-number.
    """
    if not all(is_number(v) for v in values):
        raise ComponentTypeError(message)
    return [float(v) for v in values]

def check_compatibility(operand: Any, dimension: int, number_valid: bool = False) -> List[float]:
    """
    Checks whether operand can take part in a componentwise operation with a
    vector of the given dimension, and returns it as a list of floats. Scalars
    are broadcast when number_valid is set.

    Raises:
        DimensionMismatchError: if operand is neither a matching sequence nor an allowed scalar.
        ComponentTypeError: if a matching sequence holds non-numbers.
    """
    if number_valid and is_number(operand):
        return [float(operand)] * dimension
    if is_component_sequence(operand) and len(operand) == dimension:
        return check_numbers(operand)
    suffix = " or be a scalar" if number_valid else ""
    raise DimensionMismatchError(f"Input must have matching dimension {dimension}{suffix}.")
