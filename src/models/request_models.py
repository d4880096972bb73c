from typing import Any

from pydantic import BaseModel, Field, field_validator


class IPQueryRequest(BaseModel):
    """JSON body of `POST /api/query`.

    The `ip` value is only normalized here (stringified and stripped); format
    and reserved-range checks happen in the geolocation service so they apply
    to every caller, not just the HTTP layer.
    """

    ip: str = Field(
        default="",
        description="IPv4 address to look up.",
        examples=["8.8.8.8", "114.114.114.114"],
    )

    @field_validator("ip", mode="before")
    @classmethod
    def _normalize_ip(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()
