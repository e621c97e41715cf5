class UndertoneError(ValueError):
    """Base class for input errors raised by undertone."""


class InvalidFormatError(UndertoneError):
    """A color string is not a 3- or 6-digit hex value."""


class MissingRequiredInputError(UndertoneError):
    """A required sample (skin color, or any sample at all) was not given."""
