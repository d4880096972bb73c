from pydantic import BaseModel


class LocationResult(BaseModel):
    """Merged location of an IP: administrative hints, address detail and coordinates."""

    country: str = ""
    province: str = ""
    city: str = ""
    district: str = ""
    detail: str = ""
    lat: float
    lng: float


class QueryResponse(BaseModel):
    """Response model for a successful IP query."""

    ip: str
    location: LocationResult


class ClientIPResponse(BaseModel):
    """Response model for the client IP echo endpoint."""

    ip: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
