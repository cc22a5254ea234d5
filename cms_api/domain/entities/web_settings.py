"""Domain entity for the public web-site settings."""

from dataclasses import dataclass, fields
from datetime import datetime


@dataclass
class WebSettings:
    """Site-wide contact and branding values shown on the public web-site."""

    site_name_th: str = "สภาเภสัชกรรม"
    site_name_en: str = "The Pharmacy Council of Thailand"
    slogan: str = ""
    logo_path: str = ""
    address: str = ""
    phone: str = ""
    fax: str = ""
    email: str = ""
    google_maps_url: str = ""
    google_maps_embed: str = ""
    facebook_url: str = ""
    line_id: str = ""
    youtube_url: str = ""
    updated_at: datetime | None = None

    @classmethod
    def editable_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != "updated_at")


__all__ = ["WebSettings"]
