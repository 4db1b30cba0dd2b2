"""
Exception hierarchy for CBC3 modes.

Construction problems and per-call contract violations are kept apart so
callers can tell a misconfigured mode from a misused one.
"""


class CBC3Error(Exception):
    """Base class for all errors raised by this package."""


class ConstructionError(CBC3Error, ValueError):
    """A mode could not be built from the given block ciphers or IV."""


class UsageError(CBC3Error, ValueError):
    """A call violated the mode's buffer or IV contract.

    Raised before any output byte or feedback register is modified.
    """
