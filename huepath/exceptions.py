class HuePathError(ValueError):
    """Base class for every error raised by huepath."""


class InvalidFormat(HuePathError):
    """A hex color string does not match any accepted form."""


class InvalidRange(HuePathError):
    """A color channel lies outside its valid domain."""


class PreconditionViolation(HuePathError):
    """A gradient or transition was requested with unusable arguments."""
