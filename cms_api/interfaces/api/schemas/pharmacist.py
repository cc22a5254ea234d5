"""Pharmacist registry schemas."""

from pydantic import BaseModel, ConfigDict


class PharmacistRead(BaseModel):
    id: int
    name: str
    registration_id: str
    province: str | None
    status: str | None
    address: str | None
    expiry_date: str | None
    image_url: str | None

    model_config = ConfigDict(from_attributes=True)
