"""
Typed failures raised by the psychrometric engine.

All of them derive from ValueError so the API layer can keep mapping bad
input to HTTP 422 the same way it does for any other validation problem.
"""

from typing import Optional


class PsychrometricError(ValueError):
    """Base class for every engine failure."""


class InvalidPropertySelector(PsychrometricError):
    """Known or requested property slot is outside the defined set."""


class UnsupportedProperty(PsychrometricError):
    """Requested a reserved property slot (entropy) that has no correlation."""


class InvalidUnitSystem(PsychrometricError):
    """Unit system selector is neither IP nor SI."""


class InvalidRange(PsychrometricError):
    """Inputs describe a non-physical state or fall outside a correlation's span."""


class NonConvergence(PsychrometricError):
    """
    An iterative solver stopped without meeting its tolerance.

    Attributes:
        iterations: Number of iterations performed before giving up.
        residual: Last relative residual, if one could be computed.
    """

    def __init__(
        self,
        message: str,
        iterations: int = 0,
        residual: Optional[float] = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.residual = residual
