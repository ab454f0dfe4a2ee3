"""ORM model for park volunteers."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text

from parksys.models.base import Base, JSONType, TimestampMixin

VOLUNTEER_STATUSES = ("active", "inactive", "pending", "suspended")


class Volunteer(TimestampMixin, Base):
    """
    Volunteer profile, optionally linked to a user account.

    skills is free text (e.g. "Jardinería, plomería"); interest_areas is a JSON
    list of strings.
    """

    __tablename__ = "volunteers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    emergency_contact = Column(String(255), nullable=True)
    emergency_phone = Column(String(50), nullable=True)
    gender = Column(String(32), nullable=True)
    previous_experience = Column(Text, nullable=True)
    skills = Column(Text, nullable=True)
    availability = Column(String(255), nullable=True)
    interest_areas = Column(JSONType, nullable=True)
    preferred_park_id = Column(Integer, ForeignKey("parks.id"), nullable=True)
    legal_consent = Column(Boolean, nullable=False, default=False)
    status = Column(String(32), nullable=False, default="active", index=True)
    total_hours = Column(Integer, nullable=False, default=0)
