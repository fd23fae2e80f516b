"""Exception types raised by the generators."""


class StarforgeError(Exception):
    """Base class for all generation errors."""


class ConfigurationError(StarforgeError, ValueError):
    """Raised when a generation request cannot be served with the given configuration.

    Examples: a division level outside the ladder, a coordinate outside the
    galaxy bounds, a weighted table whose weights sum to zero. The error is
    local to the request; already generated siblings are left untouched.
    """


class InvariantViolation(StarforgeError, AssertionError):
    """Raised when generated data breaks an internal invariant.

    This signals a programming error (an orbital point id that does not
    exist, a division cell outside its parent grid), not a recoverable
    condition.
    """
