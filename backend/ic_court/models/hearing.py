"""
Hearing sessions held for a dispute.
Outcome fields (result, decision, attendees) are filled in after the session.
"""
from sqlalchemy import Column, Integer, Text, ForeignKey
from ic_court.db.base import Base, utcnow
from ic_court.db.types import UTCDateTime


class Hearing(Base):
    __tablename__ = "hearings"

    id = Column(Integer, primary_key=True, index=True)
    dispute_id = Column(Integer, ForeignKey("disputes.id"), nullable=False, index=True)
    hearing_date = Column(UTCDateTime(), nullable=False)
    agenda = Column(Text, nullable=False)
    result = Column(Text, nullable=True)
    decision = Column(Text, nullable=True)
    attendees = Column(Text, nullable=True)  # Serialized attendee list, stored as-is
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime(), default=utcnow, nullable=False)
