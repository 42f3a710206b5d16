"""Typed failures raised by the conversion core.

All of them subclass ValueError so callers that only care about "bad input"
can catch that. The CLI maps each one to its own exit code.
"""


class TermFxError(ValueError):
    """Base class for every term-fx input error."""


class InvalidColorFormat(TermFxError):
    """An RGB value could not be parsed into three integer channels."""


class InvalidHue(TermFxError):
    """Hue outside [0, 360)."""


class InvalidSaturationOrValue(TermFxError):
    """Saturation or value outside [0, 100]."""


# Both names are in use by callers
InvalidColor = InvalidColorFormat
