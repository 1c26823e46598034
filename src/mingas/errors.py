class MinGasError(Exception):
    """Base class for all fatal mingas errors."""


class InputParseError(MinGasError, ValueError):
    """Command line input could not be parsed."""


class ConfigurationError(MinGasError, ValueError):
    """Depth range or cylinder catalog is unusable."""


class RenderError(MinGasError):
    """Chart could not be built or written."""
