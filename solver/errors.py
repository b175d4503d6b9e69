class InvariantViolation(RuntimeError):
    """The candidate set emptied or the turn guard was exceeded."""


class BackendError(RuntimeError):
    """A worker or bulk evaluator failed to produce its result."""
