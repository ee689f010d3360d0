"""
Custom exceptions for the orrery package.
"""


class OrreryError(Exception):
    """Base exception for orrery errors.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InvalidOrbitalElements(OrreryError, ValueError):
    """Raised when a body or catalog violates the orbital element invariants.

    This covers eccentricities outside ``[0, 1)``, non-positive semi-major
    axes or masses, and orbit-reference graphs that are not a single rooted
    tree (dangling handles, self references, cycles, zero or several
    primaries).

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class UnresolvedDependency(OrreryError, LookupError):
    """Raised when a position is requested before the orbited body's position exists.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)
