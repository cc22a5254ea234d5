"""SQLAlchemy model for the pharmacist registry."""

from sqlalchemy import Column, Integer, String, Text

from cms_api.infrastructure.database import Base


class PharmacistModel(Base):
    """Database representation of a licensed pharmacist."""

    __tablename__ = "pharmacists"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    registration_id = Column(String(50), nullable=False, index=True)
    province = Column(String(100), nullable=True)
    status = Column(String(50), nullable=True, default="ใช้งาน")
    address = Column(Text, nullable=True)
    expiry_date = Column(String(50), nullable=True)
    image_url = Column(Text, nullable=True)


__all__ = ["PharmacistModel"]
