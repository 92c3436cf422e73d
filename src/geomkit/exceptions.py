"""Exception hierarchy for geomkit.

Geometric "no result" outcomes (no intersection, degenerate shapes) are never
raised; they are returned as null shapes. The exceptions below signal misuse
of the API.
"""


class GeomkitError(Exception):
    """Base exception for all geomkit errors."""

    pass


class GeometryError(GeomkitError):
    """Errors in dispatching geometric operations."""

    pass


class UnsupportedOverlapError(GeometryError, TypeError):
    """No overlap rule exists for the given pair of shapes."""

    def __init__(self, left: object, right: object) -> None:
        self.left_type = type(left).__name__
        self.right_type = type(right).__name__
        super().__init__(
            f"Overlap of {self.left_type} and {self.right_type} is not supported"
        )


class UnsupportedTransformError(GeometryError, TypeError):
    """A transform was applied to something that is not a shape."""

    def __init__(self, operation: str, target: object) -> None:
        self.operation = operation
        self.target_type = type(target).__name__
        super().__init__(f"Cannot {operation} object of type {self.target_type}")


class CoordinateTypeError(GeomkitError, TypeError):
    """Unsupported coordinate type for a cast."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(f"Unsupported coordinate type: {target!r}")


class SerializationError(GeomkitError, ValueError):
    """Error rebuilding a shape from its dictionary form."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Cannot deserialize {shape}: {reason}")
