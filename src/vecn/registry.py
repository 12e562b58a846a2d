# vecn/registry.py
"""
Vector types and the registry that memoizes them.

A VectorType is the constructor for vectors of one dimension. A
VectorRegistry hands out exactly one VectorType per dimension, creating it
the first time it is asked for, so ``registry.get(3) is registry.get(3)``.
"""
import threading
from typing import Any, Dict, Iterable, List

from vecn import config
from vecn.logging_config import get_logger
from vecn.validation import check_dimension
from vecn.vector import Vector, build_components

logger = get_logger(__name__)

class VectorType:
    """
    Constructor and metadata for vectors of a single dimension.

    Calling a VectorType builds a vector:

        vec3 = registry.get(3)
        vec3()            # zeros
        vec3(5)           # broadcast
        vec3(1, 2, 3)     # direct
        vec3(vec2(1, 2))  # promotion, zero padded

    ``isinstance(v, vec3)`` is true only for vectors of this exact type.
    """
    __slots__ = ("_dimension", "_registry", "_name")

    def __init__(self, dimension: int, registry: "VectorRegistry"):
        self._dimension = dimension
        self._registry = registry
        self._name = f"vec{dimension}"

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def registry(self) -> "VectorRegistry":
        return self._registry

    @property
    def name(self) -> str:
        return self._name

    def __call__(self, *args) -> Vector:
        return Vector(self, build_components(self._dimension, args))

    def _make(self, values) -> Vector:
        return Vector(self, values)

    def __instancecheck__(self, instance: Any) -> bool:
        return isinstance(instance, Vector) and instance.vector_type is self

    def __repr__(self) -> str:
        return f"<vector type {self._name}>"

class VectorRegistry:
    """
    Memoizing factory mapping a dimension to its VectorType.

    Entries are created on first use and never evicted. Lookup-or-create runs
    under a lock so concurrent callers always see the same VectorType for a
    dimension. Vectors built from a registry's types derive new vectors
    (swizzles, arithmetic results) from that same registry.
    """
    def __init__(self, min_dimension: int = config.MIN_DIMENSION, preload: Iterable[int] = ()):
        self._min_dimension = check_dimension(min_dimension)
        self._types: Dict[int, VectorType] = {}
        self._lock = threading.Lock()
        for dimension in preload:
            self.get(dimension)

    @property
    def min_dimension(self) -> int:
        return self._min_dimension

    def get(self, dimension: Any) -> VectorType:
        """
        Returns the VectorType for dimension, creating it if needed.

        Raises:
            InvalidDimension: if dimension is not an integer of at least min_dimension.
        """
        dim = check_dimension(dimension, self._min_dimension)
        with self._lock:
            vector_type = self._types.get(dim)
            if vector_type is None:
                vector_type = VectorType(dim, self)
                self._types[dim] = vector_type
                logger.debug("Registered vector type %s", vector_type.name)
        return vector_type

    def __getitem__(self, dimension: Any) -> VectorType:
        return self.get(dimension)

    def __contains__(self, dimension: Any) -> bool:
        return dimension in self._types

    def __len__(self) -> int:
        return len(self._types)

    def dimensions(self) -> List[int]:
        """The dimensions registered so far, in ascending order."""
        with self._lock:
            return sorted(self._types)

    def __repr__(self) -> str:
        return f"VectorRegistry(min_dimension={self._min_dimension}, dimensions={self.dimensions()})"

default_registry = VectorRegistry(preload=config.PRESET_DIMENSIONS)

def get_vector_type(dimension: Any) -> VectorType:
    """Returns the VectorType for dimension from the default registry."""
    return default_registry.get(dimension)

def is_vector(value: Any) -> bool:
    """True for any vector built by any VectorType, from any registry."""
    return isinstance(value, Vector)

vec2 = default_registry.get(2)
vec3 = default_registry.get(3)
vec4 = default_registry.get(4)
