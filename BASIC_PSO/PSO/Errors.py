# File: BASIC_PSO/PSO/Errors.py
# Exception types raised by the optimizer. Nothing here is retried or masked.


class PSOError(Exception):
    """Base class for all optimizer failures."""


class InvalidParameter(PSOError, ValueError):
    """Malformed run configuration. Raised before any swarm state is allocated."""


class ObjectiveEvaluationFailure(PSOError, RuntimeError):
    """
    The objective raised, or returned NaN/Inf or a wrongly shaped result.

    Attributes:
        positions: The positions that were being evaluated when the failure happened.
    """

    def __init__(self, message, positions=None):
        super().__init__(message)
        self.positions = positions
