"""SQLAlchemy model for the singleton web-site settings row."""

from sqlalchemy import Column, DateTime, Integer, Text, func

from cms_api.infrastructure.database import Base


class WebSettingsModel(Base):
    """Database representation of the public web-site settings."""

    __tablename__ = "web_settings"

    id = Column(Integer, primary_key=True)
    site_name_th = Column(Text, nullable=True)
    site_name_en = Column(Text, nullable=True)
    slogan = Column(Text, nullable=True)
    logo_path = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    fax = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    google_maps_url = Column(Text, nullable=True)
    google_maps_embed = Column(Text, nullable=True)
    facebook_url = Column(Text, nullable=True)
    line_id = Column(Text, nullable=True)
    youtube_url = Column(Text, nullable=True)
    updated_at = Column(DateTime, nullable=True, server_default=func.now(), onupdate=func.now())


__all__ = ["WebSettingsModel"]
