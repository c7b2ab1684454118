class InvalidStateError(RuntimeError):
    """Raised when a builder is read before it holds the requested state."""


class MalformedAnnotationFormat(ValueError):
    """Raised when a qualifier's string form is not `@Name(members)`."""
