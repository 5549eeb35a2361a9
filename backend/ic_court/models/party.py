from sqlalchemy import Column, Integer, String, ForeignKey
from ic_court.db.base import Base, utcnow
from ic_court.db.types import UTCDateTime
from ic_court.models.enums import PartyRole, PartyType, sql_enum

class Party(Base):
    __tablename__ = "parties"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    party_type = Column(sql_enum(PartyType, "party_type"), nullable=False)
    address = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    role = Column(sql_enum(PartyRole, "party_role"), nullable=False)
    dispute_id = Column(Integer, ForeignKey("disputes.id"), nullable=False, index=True)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime(), default=utcnow, nullable=False)
