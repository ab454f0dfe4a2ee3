"""ORM models for parks, the amenity catalog and the park/amenity join table."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text

from parksys.models.base import Base, TimestampMixin


class Park(TimestampMixin, Base):
    __tablename__ = "parks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    municipality_id = Column(Integer, nullable=True, index=True)
    park_type = Column(String(64), nullable=True)
    description = Column(Text, nullable=True)
    address = Column(String(512), nullable=False, default="")
    postal_code = Column(String(16), nullable=True)
    latitude = Column(String(32), nullable=True)
    longitude = Column(String(32), nullable=True)
    area = Column(Float, nullable=True)
    opening_hours = Column(String(255), nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)


class Amenity(Base):
    """Catalog entry (playground, restrooms, ...); names are unique."""

    __tablename__ = "amenities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    icon = Column(String(255), nullable=True)
    category = Column(String(64), nullable=True)
    icon_type = Column(String(32), nullable=False, default="system")
    custom_icon_url = Column(String(1024), nullable=True)


class ParkAmenity(Base):
    """One amenity installed in one park."""

    __tablename__ = "park_amenities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    park_id = Column(Integer, ForeignKey("parks.id"), nullable=False, index=True)
    amenity_id = Column(Integer, ForeignKey("amenities.id"), nullable=False, index=True)
    module_name = Column(String(255), nullable=True)
    surface_area = Column(Float, nullable=True)
    status = Column(String(32), nullable=False, default="active")
    description = Column(Text, nullable=True)
