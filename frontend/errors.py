#file: frontend/errors.py


class DataError(Exception):
    """Base class for every failure that ends in a "no data" state on the dashboard."""

    default_message = "Couldn't get air quality data for this location"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredential(DataError):
    default_message = "Please enter your WAQI API token first"


class ProviderError(DataError):
    """The feed answered with a non-"ok" status."""

    default_message = "Failed to fetch air quality data"


class InvalidCredential(ProviderError):
    """The feed rejected the token; the stored token should be dropped."""

    default_message = "Invalid key"


class MalformedPayload(DataError):
    default_message = "Unexpected response from the air quality provider"


class NotFound(DataError):
    default_message = "Location not found"


class NetworkFailure(DataError):
    default_message = "Network request failed"
