"""Color input and viewing environment errors."""


class CamColorError(Exception):
    """Base class for camcolor errors."""
    pass


class InvalidColorError(CamColorError):
    """Value is not a valid packed ARGB color or hex string."""
    pass


class ViewingEnvironmentError(CamColorError):
    """Viewing environment parameters are out of range."""
    pass
