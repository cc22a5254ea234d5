"""Web-site settings schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class WebSettingsRead(BaseModel):
    site_name_th: str
    site_name_en: str
    slogan: str
    logo_path: str
    address: str
    phone: str
    fax: str
    email: str
    google_maps_url: str
    google_maps_embed: str
    facebook_url: str
    line_id: str
    youtube_url: str
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class WebSettingsUpdate(BaseModel):
    site_name_th: str | None = None
    site_name_en: str | None = None
    slogan: str | None = None
    logo_path: str | None = None
    address: str | None = None
    phone: str | None = None
    fax: str | None = None
    email: str | None = None
    google_maps_url: str | None = None
    google_maps_embed: str | None = None
    facebook_url: str | None = None
    line_id: str | None = None
    youtube_url: str | None = None

    model_config = ConfigDict(extra="forbid")
