"""ORM model for advertisements shown on the public site."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from parksys.models.base import Base, TimestampMixin

AD_STATUSES = ("draft", "active", "paused", "expired")


class Advertisement(TimestampMixin, Base):
    __tablename__ = "advertisements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(1024), nullable=True)
    target_url = Column(String(1024), nullable=True)
    campaign_name = Column(String(255), nullable=True)
    status = Column(String(32), nullable=False, default="draft", index=True)
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
