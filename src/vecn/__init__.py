# vecn/__init__.py
from vecn.exceptions import (
    ArityError,
    ComponentTypeError,
    DemotionError,
    DimensionMismatchError,
    DuplicateSwizzleError,
    IncompleteSpliceError,
    InvalidDimension,
    NormOrderError,
    RangeError,
    VectorError,
)
from vecn.logging_config import attach_null_handler, get_logger, setup_logging
from vecn.registry import (
    VectorRegistry,
    VectorType,
    default_registry,
    get_vector_type,
    is_vector,
    vec2,
    vec3,
    vec4,
)
from vecn.utils import add, lerp, multiply, random_in_unit_sphere, random_unit_vector, reflect, slerp
from vecn.vector import Vector

attach_null_handler()

__all__ = [
    "ArityError",
    "ComponentTypeError",
    "DemotionError",
    "DimensionMismatchError",
    "DuplicateSwizzleError",
    "IncompleteSpliceError",
    "InvalidDimension",
    "NormOrderError",
    "RangeError",
    "VectorError",
    "get_logger",
    "setup_logging",
    "Vector",
    "VectorRegistry",
    "VectorType",
    "default_registry",
    "get_vector_type",
    "is_vector",
    "vec2",
    "vec3",
    "vec4",
    "add",
    "lerp",
    "multiply",
    "random_in_unit_sphere",
    "random_unit_vector",
    "reflect",
    "slerp",
]
