class GatewayError(Exception):
    """Base class for gateway failures."""


class ConfigurationError(GatewayError):
    """Startup configuration is unusable; the process cannot serve."""


class InferenceError(GatewayError):
    """The remote model invocation failed or returned nothing usable."""
