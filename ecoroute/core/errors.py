"""Exception types for the EcoRoute estimation core."""


class InvalidInputError(ValueError):
    """Raised when an argument is outside the domain an estimator accepts.

    Subclasses :class:`ValueError` so that callers catching the generic
    validation error keep working.
    """
