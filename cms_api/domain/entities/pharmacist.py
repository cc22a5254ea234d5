"""Domain entity representing a registered pharmacist."""

from dataclasses import dataclass


@dataclass
class Pharmacist:
    id: int
    name: str
    registration_id: str
    province: str | None
    status: str | None
    address: str | None
    expiry_date: str | None
    image_url: str | None


__all__ = ["Pharmacist"]
