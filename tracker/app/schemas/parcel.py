"""
Parcel Pydantic schemas.

Defines the input and output shapes of the parcel repository.
"""

from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import Optional


def utc_timestamp() -> str:
    """Current UTC time as an RFC3339 string (second precision)."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelCreate(BaseModel):
    """Schema for creating a new parcel."""
    client: int = Field(..., description="Owning client identifier")
    address: str = Field(..., max_length=500, description="Delivery address")
    # Accepted for symmetry with ParcelRead; creation always stores "registered"
    status: Optional[str] = Field(None, description="Ignored on create")
    created_at: str = Field(default_factory=utc_timestamp, description="RFC3339 creation time")


class ParcelRead(BaseModel):
    """Schema for a stored parcel."""
    number: int
    client: int
    status: str
    address: str
    created_at: str

    class Config:
        from_attributes = True
