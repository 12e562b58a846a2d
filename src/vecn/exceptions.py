# vecn/exceptions.py

class VectorError(Exception):
    """Base exception for vecn errors."""
    pass

class InvalidDimension(VectorError, ValueError):
    """Raised when a vector type is requested for a dimension that is not a positive integer."""
    pass

class ArityError(VectorError, TypeError):
    """Raised when a vector type is called with the wrong number of components."""
    pass

class ComponentTypeError(VectorError, TypeError):
    """Raised when a non-numeric value is given where a component is expected."""
    pass

class DemotionError(VectorError, TypeError):
    """Raised when building a vector from a source of higher dimension."""
    pass

class RangeError(VectorError, IndexError):
    """Raised when assigning to an index at or beyond the vector's dimension."""
    pass

class DuplicateSwizzleError(VectorError, ValueError):
    """Raised when a swizzle assignment repeats a symbol."""
    pass

class DimensionMismatchError(VectorError, TypeError):
    """Raised when an operand does not have the dimension an operation needs."""
    pass

class IncompleteSpliceError(VectorError, ValueError):
    """Raised when a splice would change the length of a vector."""
    pass

class NormOrderError(VectorError, ValueError):
    """Raised when a p-norm is requested for an order that is not positive."""
    pass
