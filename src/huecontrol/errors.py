class HueError(Exception):
    """Base class for everything raised by huecontrol."""


class BridgeConnectionError(HueError, ConnectionError):
    """The bridge answered, but reported no lights to control."""


class TransportError(HueError):
    """A GET or PUT against the bridge failed."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ConfigurationError(HueError):
    pass
