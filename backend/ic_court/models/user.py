from sqlalchemy import Column, Integer, String, Boolean
from ic_court.db.base import Base, utcnow
from ic_court.db.types import UTCDateTime
from ic_court.models.enums import UserRole, sql_enum

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    role = Column(sql_enum(UserRole, "user_role"), nullable=False)
    phone = Column(String, nullable=True)
    password_hash = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(UTCDateTime(), default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime(), default=utcnow, nullable=False)

    def __repr__(self):
        return f"<User {self.username} ({self.role.value})>"
