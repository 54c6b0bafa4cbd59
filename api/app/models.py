import uuid

from sqlalchemy import JSON, Column, DateTime, String, func

from .database import Base


def _uuid_str() -> str:
    return str(uuid.uuid4())


class ProfileRecord(Base):
    __tablename__ = "profile"

    id = Column(String(36), primary_key=True, default=_uuid_str)
    data = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class UserAccount(Base):
    __tablename__ = "user_account"

    id = Column(String(36), primary_key=True, default=_uuid_str)
    username = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
