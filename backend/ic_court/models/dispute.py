from sqlalchemy import Column, Integer, String, Text, ForeignKey
from ic_court.db.base import Base, utcnow
from ic_court.db.types import UTCDateTime
from ic_court.models.enums import DisputeStatus, DisputeType, sql_enum

class Dispute(Base):
    __tablename__ = "disputes"

    id = Column(Integer, primary_key=True, index=True)
    dispute_number = Column(String, unique=True, index=True, nullable=False)
    dispute_type = Column(sql_enum(DisputeType, "dispute_type"), nullable=False)
    registration_date = Column(UTCDateTime(), nullable=False)
    description = Column(Text, nullable=True)

    status = Column(sql_enum(DisputeStatus, "dispute_status"), default=DisputeStatus.NEW, nullable=False)

    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    # Relationships
    # creator = relationship("User", foreign_keys=[created_by])
