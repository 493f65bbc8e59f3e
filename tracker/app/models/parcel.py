"""
Parcel database model.

Maps the single `parcel` table owned by the repository.
"""

from sqlalchemy import Column, Integer, String
from tracker.app.db.session import Base
from tracker.app.models.parcel_enums import ParcelStatus


class Parcel(Base):
    """
    Parcel model for the tracker.

    A parcel belongs to one client. Its number is assigned by the database
    and never reused (AUTOINCREMENT on SQLite).
    """
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}

    number = Column(Integer, primary_key=True, autoincrement=True)

    # Ownership
    client = Column(Integer, nullable=False, index=True)

    # Status (plain string, the status set is open-ended)
    status = Column(String(32), nullable=False, default=ParcelStatus.REGISTERED.value)

    # Delivery information
    address = Column(String(500), nullable=False)

    # RFC3339 timestamp string set by the caller at creation
    created_at = Column(String(64), nullable=False)

    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status}')>"
