"""Exception hierarchy for the baroclinic cyclogenesis model."""


class CyclogenesisError(Exception):
    """Base class for all package specific exceptions."""


class MeteoError(CyclogenesisError, ValueError):
    """Raised when a physical input lies outside its accepted range.

    Attributes
    ----------
    value : float
        The offending input value.
    """

    template = "Invalid value: {value}"

    def __init__(self, value: float):
        self.value = value
        super().__init__(self.template.format(value=value))


class InvalidLatitude(MeteoError):
    """Latitude outside [-90, 90] degrees."""

    template = "Invalid latitude: {value}°"


class InvalidAltitude(MeteoError):
    """Altitude outside [-400, 20000] meters."""

    template = "Invalid altitude: {value} m"


class InvalidPressure(MeteoError):
    """Pressure outside [100, 1100] hPa."""

    template = "Invalid pressure: {value} hPa"


class InvalidTemperature(MeteoError):
    """Temperature perturbation outside [-50, 50] K."""

    template = "Invalid temperature: {value} K"


class ConfigError(CyclogenesisError, ValueError):
    """Raised when a sweep configuration fails validation."""


class ConsistencyError(CyclogenesisError, RuntimeError):
    """Raised by strict consistency checks on simulation output."""


__all__ = [
    "CyclogenesisError",
    "MeteoError",
    "InvalidLatitude",
    "InvalidAltitude",
    "InvalidPressure",
    "InvalidTemperature",
    "ConfigError",
    "ConsistencyError",
]
