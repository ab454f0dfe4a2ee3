"""ORM models for park assets (equipment, furniture, vehicles) and their categories."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text

from parksys.models.base import Base, TimestampMixin

ASSET_STATUSES = ("active", "maintenance", "retired", "lost")


class AssetCategory(Base):
    __tablename__ = "asset_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class Asset(TimestampMixin, Base):
    __tablename__ = "assets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    serial_number = Column(String(255), nullable=True)
    category_id = Column(Integer, ForeignKey("asset_categories.id"), nullable=False, index=True)
    park_id = Column(Integer, ForeignKey("parks.id"), nullable=False, index=True)
    status = Column(String(32), nullable=False, default="active")
    condition = Column(String(32), nullable=True)
    location_description = Column(String(512), nullable=True)
    acquisition_cost = Column(Float, nullable=True)
    responsible_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    notes = Column(Text, nullable=True)
