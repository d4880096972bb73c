class AppError(Exception):
    """Base application error for the IP trace service."""


class InvalidIpError(AppError):
    """Raised when the supplied value is not a dotted-quad IPv4 address."""


class ReservedIpError(AppError):
    """Raised when the supplied IP address is reserved/private (e.g. 127.0.0.1, 192.168.x.x)."""

    def __init__(self, message: str, range_name: str = "", cidr: str = "") -> None:
        super().__init__(message)
        self.range_name = range_name
        self.cidr = cidr


class ProviderError(AppError):
    """Base error for geolocation / reverse-geocode provider failures."""


class UpstreamServiceError(ProviderError):
    """Raised when a provider answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class LocationUnavailableError(ProviderError):
    """Raised when a provider succeeds but the payload lacks the data we need."""


class ProviderCommunicationError(ProviderError):
    """Raised when a provider cannot be reached or its body cannot be decoded."""
