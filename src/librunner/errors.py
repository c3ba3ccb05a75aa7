"""Exceptions raised by librunner computations."""


class PreconditionError(ValueError):
    """Raised when an operation is invoked with inputs it cannot compute on.

    Field-level violations (negative distance, negative duration) surface as
    ``pydantic.ValidationError`` instead; both subclass ``ValueError``.
    """
