# vecn/utils.py
import math
from functools import reduce
from typing import Optional

import numpy as np

from vecn.exceptions import ArityError, ComponentTypeError, DimensionMismatchError
from vecn.registry import default_registry
from vecn.vector import Vector

def _check_same_dimension(vecs) -> int:
    if not vecs:
        raise ArityError("At least one vector is required.")
    if not all(isinstance(v, Vector) for v in vecs):
        raise ComponentTypeError("All arguments must be vectors.")
    dim = vecs[0].dim
    if not all(v.dim == dim for v in vecs):
        raise DimensionMismatchError("All vectors must have the same dimension.")
    return dim

def _clamp(t: float, low: float = 0.0, high: float = 1.0) -> float:
    return low if t < low else (high if t > high else t)

def add(*vecs: Vector) -> Vector:
    """
    Adds any number of vectors of the same dimension.
    """
    _check_same_dimension(vecs)
    return reduce(lambda acc, v: acc.plus(v), vecs, vecs[0].vector_type())

def multiply(*vecs: Vector) -> Vector:
    """
    Multiplies any number of vectors of the same dimension componentwise.
    """
    _check_same_dimension(vecs)
    return reduce(lambda acc, v: acc.times(v), vecs, vecs[0].vector_type(1))

def lerp(v1: Vector, v2: Vector, t: float) -> Vector:
    """
    Linearly interpolates between v1 and v2. t is clamped to [0, 1].
    """
    _check_same_dimension((v1, v2))
    t = _clamp(t)
    return v1.plus(v2.minus(v1).times(t))

def slerp(v1: Vector, v2: Vector, t: float) -> Vector:
    """
    Spherically interpolates between v1 and v2. t is clamped to [0, 1] and
    the magnitude is interpolated linearly alongside the direction.
    """
    _check_same_dimension((v1, v2))
    t = _clamp(t)

    dot = _clamp(v1.normalize().dot(v2.normalize()), -1.0, 1.0)
    theta = math.acos(dot) * t
    relative = v2.minus(v1.times(dot)).normalize()
    magnitude = v1.magnitude + (v2.magnitude - v1.magnitude) * t
    return v1.times(math.cos(theta)).plus(relative.times(math.sin(theta))).normalize().times(magnitude)

def reflect(v: Vector, n: Vector) -> Vector:
    """
    Reflects vector v about the normal n.
    """
    return v.reflect(n)

def random_in_unit_sphere(dimension: int = 3, rng: Optional[np.random.Generator] = None) -> Vector:
    """
    Returns a random point inside a unit sphere (a unit ball of the given dimension).
    """
    if rng is None:
        rng = np.random.default_rng()
    vector_type = default_registry.get(dimension)
    while True:
        p = vector_type(rng.uniform(-1.0, 1.0, vector_type.dimension))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(dimension: int = 3, rng: Optional[np.random.Generator] = None) -> Vector:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(dimension, rng).normalize()
