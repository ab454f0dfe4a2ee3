"""ORM model for activities scheduled in a park."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from parksys.models.base import Base, TimestampMixin


class Activity(TimestampMixin, Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    park_id = Column(Integer, ForeignKey("parks.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(64), nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=True)
    location = Column(String(255), nullable=True)
    capacity = Column(Integer, nullable=True)
    instructor_id = Column(Integer, ForeignKey("users.id"), nullable=True)
