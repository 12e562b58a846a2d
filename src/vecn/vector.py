# vecn/vector.py
import math
import numbers
from collections.abc import Sequence
from typing import Any, Callable, List, Optional, Union

import numpy as np

from vecn import config
from vecn.exceptions import (
    ArityError,
    ComponentTypeError,
    DemotionError,
    DimensionMismatchError,
    IncompleteSpliceError,
    NormOrderError,
    RangeError,
)
from vecn.swizzle import NOT_HANDLED, swizzle_get, swizzle_set
from vecn.validation import (
    KeyKind,
    check_compatibility,
    check_numbers,
    classify_key,
    flatten_outer,
    is_component_sequence,
    is_number,
    promote,
)

Operand = Union[float, Sequence]

def build_components(dimension: int, args: tuple) -> List[float]:
    """
    Turns constructor arguments into exactly `dimension` floats.

    Accepts no arguments (zeros), a single number (broadcast), `dimension`
    numbers, or a single vector of lower or equal dimension (zero-padded).
    Single-element lists/tuples are unwrapped first, so vec3([1, 2, 3]) and
    vec3(1, 2, 3) are the same.
    """
    if len(args) == 1 and isinstance(args[0], Vector):
        source = args[0]
        if source.dim > dimension:
            raise DemotionError(f"Cannot demote a vec{source.dim} to vec{dimension}.")
        return promote(source._components, dimension)

    args = flatten_outer(args)
    values = check_numbers(args, "All arguments must be numbers.")

    if len(values) == 0:
        return [0.0] * dimension
    if len(values) == 1:
        return values * dimension
    if len(values) != dimension:
        raise ArityError(
            f"Argument list must be empty, have a single number, or have a length equal to the dimension ({dimension}); got {len(values)}."
        )
    return values

class Vector(Sequence):
    """
    A fixed-size vector of floats.

    Vectors are created through a vector type (see vecn.registry), never
    resized, and only ever hold numbers. Components are reachable by index
    (v[0]) and, for dimensions up to 4, by swizzle names (v.x, v.zyx, v.rgb).
    Arithmetic always returns a new vector.

    The constructor takes already validated components and is not part of
    the public API; a component count other than the type's dimension
    raises ArityError.
    """
    __slots__ = ("_type", "_components")

    # Mutable, so not hashable
    __hash__ = None

    # Make numpy defer to our reflected operators (np.float64(2) * v)
    __array_ufunc__ = None

    def __init__(self, vector_type, components):
        components = np.array(components, dtype=np.float64)
        if components.shape != (vector_type.dimension,):
            raise ArityError(
                f"{vector_type.name} takes exactly {vector_type.dimension} components, got shape {components.shape}."
            )
        object.__setattr__(self, "_type", vector_type)
        object.__setattr__(self, "_components", components)

    # --------------------------------------------------------------------------
    #   Shape

    @property
    def vector_type(self):
        return self._type

    @property
    def dim(self) -> int:
        return self._type.dimension

    @property
    def dimension(self) -> int:
        return self._type.dimension

    @property
    def length(self) -> int:
        return self._type.dimension

    def __len__(self) -> int:
        return self._type.dimension

    def keys(self) -> range:
        """The indices of this vector; nothing else is enumerable."""
        return range(self.dim)

    # --------------------------------------------------------------------------
    #   Access

    def __iter__(self):
        for x in self._components:
            yield float(x)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._derive(self.to_list()[key])

        kind, payload = classify_key(key, self.dim)
        if kind is KeyKind.INDEX:
            if 0 <= payload < self.dim:
                return float(self._components[payload])
            raise IndexError(f"Index {payload} is out of range for {self._type.name}.")
        if kind is KeyKind.SWIZZLE:
            result = swizzle_get(self, key, payload)
            if result is not NOT_HANDLED:
                return result
        if isinstance(key, str):
            raise KeyError(key)
        raise TypeError(f"{self._type.name} indices must be integers, slices or swizzle names, not {type(key).__name__}.")

    def __getattr__(self, name: str):
        # Only reached when ordinary lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        kind, payload = classify_key(name, self.dim)
        if kind is KeyKind.SWIZZLE:
            result = swizzle_get(self, name, payload)
            if result is not NOT_HANDLED:
                return result
        raise AttributeError(f"'{self._type.name}' object has no attribute '{name}'")

    # --------------------------------------------------------------------------
    #   Mutation

    def __setitem__(self, key, value) -> None:
        if isinstance(key, slice):
            self._set_slice(key, value)
            return

        kind, payload = classify_key(key, self.dim)
        if kind is KeyKind.INDEX:
            self._set_index(payload, value)
        elif kind is KeyKind.SWIZZLE:
            swizzle_set(self, key, payload, value)
        elif kind is KeyKind.SHAPE:
            return
        elif isinstance(key, str):
            raise KeyError(f"{self._type.name} is sealed; cannot set {key!r}.")
        else:
            raise TypeError(f"{self._type.name} indices must be integers, slices or swizzle names, not {type(key).__name__}.")

    def __setattr__(self, name: str, value) -> None:
        kind, payload = classify_key(name, self.dim)
        if kind is KeyKind.SHAPE:
            return
        if kind is KeyKind.SWIZZLE:
            swizzle_set(self, name, payload, value)
            return
        if kind is KeyKind.INDEX:
            self._set_index(payload, value)
            return
        raise AttributeError(f"'{self._type.name}' object is sealed; cannot set attribute '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{self._type.name}' object is sealed; cannot delete attribute '{name}'")

    def __delitem__(self, key) -> None:
        raise TypeError(f"Cannot delete components of a {self._type.name}.")

    def _set_index(self, index: int, value) -> None:
        if index < 0 or index >= self.dim:
            raise RangeError(f"Index {index} is out of range; {self._type.name} has {self.dim} components.")
        if not is_number(value):
            raise ComponentTypeError("Vectors may only contain numbers.")
        self._components[index] = float(value)

    def _set_slice(self, key: slice, values) -> None:
        indices = range(*key.indices(self.dim))
        if not is_component_sequence(values):
            raise ComponentTypeError("Slice assignment requires a sequence of numbers.")
        if len(values) != len(indices):
            raise IncompleteSpliceError("Slice assignment must replace every selected component.")
        self._assign(zip(indices, check_numbers(values)))

    def _assign(self, pairs) -> None:
        """Writes already-validated (index, value) pairs."""
        for index, value in pairs:
            self._components[index] = value

    # --------------------------------------------------------------------------
    #   Arithmetic

    def _make(self, values) -> "Vector":
        return self._type._make(values)

    def neg(self) -> "Vector":
        """Returns a new vector with every component negated."""
        return self._make(-self._components)

    def plus(self, v: Operand) -> "Vector":
        """
        Adds v componentwise. A scalar is added to each component.
        """
        other = check_compatibility(v, self.dim, number_valid=True)
        return self._make(self._components + np.asarray(other))

    def minus(self, v: Operand) -> "Vector":
        """
        Subtracts v componentwise. A scalar is subtracted from each component.
        """
        other = check_compatibility(v, self.dim, number_valid=True)
        return self._make(self._components - np.asarray(other))

    def times(self, v: Operand) -> "Vector":
        """
        Multiplies by v componentwise. A scalar scales the vector.
        """
        other = check_compatibility(v, self.dim, number_valid=True)
        return self._make(self._components * np.asarray(other))

    def div(self, v: Operand) -> "Vector":
        """
        Divides by v componentwise. A scalar scales the vector by 1/v.
        Division by zero follows IEEE-754 (inf or nan), it does not raise.
        """
        other = check_compatibility(v, self.dim, number_valid=True)
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._make(self._components / np.asarray(other))

    def pow(self, p: float) -> "Vector":
        """Raises each component to the power p."""
        if not is_number(p):
            raise ComponentTypeError("Exponent must be a number.")
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return self._make(np.power(self._components, float(p)))

    def __add__(self, other: Operand) -> "Vector":
        return self.plus(other)

    def __radd__(self, other: Operand) -> "Vector":
        return self.plus(other)

    def __sub__(self, other: Operand) -> "Vector":
        return self.minus(other)

    def __rsub__(self, other: Operand) -> "Vector":
        return self.neg().plus(other)

    def __mul__(self, other: Operand) -> "Vector":
        return self.times(other)

    def __rmul__(self, other: Operand) -> "Vector":
        return self.times(other)

    def __truediv__(self, other: Operand) -> "Vector":
        return self.div(other)

    def __rtruediv__(self, other: Operand) -> "Vector":
        numerator = check_compatibility(other, self.dim, number_valid=True)
        return self._make(numerator).div(self)

    def __pow__(self, p: float) -> "Vector":
        return self.pow(p)

    def __neg__(self) -> "Vector":
        return self.neg()

    def __pos__(self) -> "Vector":
        return self.copy()

    # --------------------------------------------------------------------------
    #   Vector operations

    def dot(self, v: Sequence) -> float:
        """Dot product with a vector or sequence of the same dimension."""
        other = check_compatibility(v, self.dim)
        return float(sum(x * y for x, y in zip(self, other)))

    def cross(self, v: Sequence) -> "Vector":
        """Cross product. Only defined for 3-dimensional vectors."""
        if self.dim != 3:
            raise DimensionMismatchError(f"Cross product needs 3 dimensions, {self._type.name} has {self.dim}.")
        ox, oy, oz = check_compatibility(v, 3)
        x, y, z = self
        return self._make([
            y * oz - z * oy,
            z * ox - x * oz,
            x * oy - y * ox
        ])

    @property
    def magnitude(self) -> float:
        """The L2 (Euclidean) norm of the vector."""
        return math.sqrt(self.dot(self))

    def pnorm(self, p: float) -> float:
        """
        Evaluates the p-norm (lp-norm) of this vector. p must be positive;
        p = math.inf gives the largest absolute component.
        """
        if not is_number(p):
            raise ComponentTypeError("The norm order must be a number.")
        if not p > 0:
            raise NormOrderError(f"The norm order must be positive, got {p!r}.")
        if math.isinf(p):
            return float(np.max(np.abs(self._components)))
        return math.pow(sum(abs(x) ** p for x in self), 1 / p)

    def normalize(self) -> "Vector":
        """
        Scales this vector to a magnitude of 1. The zero vector stays zero.
        """
        m = self.magnitude
        if m == 0:
            return self._make(np.zeros(self.dim))
        return self.div(m)

    def reflect(self, normal: Sequence) -> "Vector":
        """
        Reflects this vector across the hyperplane described by normal. The
        normal does not need to be unit length.
        """
        n = self._make(check_compatibility(normal, self.dim)).normalize()
        return self.minus(n.times(2 * self.dot(n)))

    # --------------------------------------------------------------------------
    #   Extras

    def argmax(self) -> List[int]:
        """Indices of the max value in this vector."""
        top = self.max()
        return [i for i, x in enumerate(self) if x == top]

    def argmin(self) -> List[int]:
        """Indices of the min value in this vector."""
        bottom = self.min()
        return [i for i, x in enumerate(self) if x == bottom]

    def choose(self, indices: Sequence[int]) -> Union["Vector", List[float]]:
        """
        Creates a new vector from the given indices of this one, like a
        swizzle by position. v.choose([2, 0]) == v.zx
        """
        if not is_component_sequence(indices):
            raise ComponentTypeError("Argument must be a sequence of indices.")
        chosen = []
        for i in indices:
            if not isinstance(i, numbers.Integral) or isinstance(i, bool) or not 0 <= i < self.dim:
                raise RangeError(f"{i!r} is not a valid index for {self._type.name}.")
            chosen.append(self[int(i)])
        return self._derive(chosen)

    def equals(self, v) -> bool:
        """True if v has the same dimension and values."""
        return self == v

    def approximately_equals(self, v, epsilon: Optional[float] = None) -> bool:
        """
        True if v has the same dimension and every component is within
        epsilon of this vector's.
        """
        if epsilon is None:
            epsilon = config.EPSILON
        if not is_component_sequence(v) or len(v) != self.dim:
            return False
        return all(is_number(y) and abs(x - y) < epsilon for x, y in zip(self, v))

    def max(self) -> float:
        return float(np.max(self._components))

    def min(self) -> float:
        return float(np.min(self._components))

    def sum(self) -> float:
        return float(sum(self))

    def to_list(self) -> List[float]:
        return [float(x) for x in self._components]

    def to_numpy(self) -> np.ndarray:
        """A copy of the components as a float64 array."""
        return self._components.copy()

    def __array__(self, dtype=None, copy=None):
        return self._components.astype(dtype if dtype is not None else np.float64, copy=True)

    def copy(self) -> "Vector":
        return self._make(self._components)

    def __copy__(self) -> "Vector":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector":
        return self.copy()

    # --------------------------------------------------------------------------
    #   Sequence overrides
    #
    # These degrade to plain lists whenever the result could not be a vector.

    def _derive(self, values: List[Any]) -> Union["Vector", List[Any]]:
        registry = self._type.registry
        if len(values) >= registry.min_dimension and all(is_number(x) for x in values):
            return registry.get(len(values))(values)
        return list(values)

    def concat(self, *others) -> Union["Vector", List[Any]]:
        """
        Appends others to this vector's components. Sequences are spread,
        anything else is appended as a single item.
        """
        result = self.to_list()
        for other in others:
            if is_component_sequence(other):
                result.extend(other)
            else:
                result.append(other)
        return self._derive(result)

    def filter(self, fn: Callable[[float], bool]) -> Union["Vector", List[float]]:
        return self._derive([x for x in self if fn(x)])

    def map(self, fn: Callable[[float], Any]) -> Union["Vector", List[Any]]:
        """
        Applies fn to each component. Gives a vector of the same dimension when
        every result is a number, otherwise a list.
        """
        return self._derive([fn(x) for x in self])

    def splice(self, start: int, delete_count: Optional[int] = None, *items) -> List[float]:
        """
        Replaces delete_count components from start with items, in place. The
        vector's length may not change, so as many items must be given as are
        removed. Returns the removed components.
        """
        test = self.to_list()
        if start < 0:
            start = max(self.dim + start, 0)
        start = min(start, self.dim)
        if delete_count is None:
            delete_count = self.dim - start
        delete_count = max(0, min(delete_count, self.dim - start))

        removed = test[start:start + delete_count]
        test[start:start + delete_count] = items

        if len(test) != self.dim:
            raise IncompleteSpliceError("All removed elements must be replaced.")
        values = check_numbers(test, "All elements must be numbers.")

        self._assign(enumerate(values))
        return removed

    # --------------------------------------------------------------------------
    #   Comparison and display

    def __eq__(self, other) -> bool:
        if not is_component_sequence(other):
            return NotImplemented
        if len(other) != self.dim:
            return False
        return all(is_number(y) and x == y for x, y in zip(self, other))

    def __repr__(self) -> str:
        return f"{self._type.name}({', '.join(repr(x) for x in self)})"

    def __str__(self) -> str:
        return "[ " + ", ".join(str(x) for x in self) + " ]"
