import uuid
from sqlalchemy import Column, String, Text, DateTime, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from quora.utils.role_permissions import ROLE_NONADMIN
from .base import Base, now_utc


class User(Base):
    __tablename__ = 'users'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(30), nullable=False)
    last_name = Column(String(30), nullable=False)
    user_name = Column(String(30), nullable=False)
    email = Column(String(50), nullable=False)
    password_hash = Column(Text, nullable=False)
    country = Column(String(30), nullable=True)
    about_me = Column(String(50), nullable=True)
    dob = Column(String(30), nullable=True)
    contact_number = Column(String(30), nullable=True)
    # 'admin'|'nonadmin'
    role = Column(String(30), nullable=False, default=ROLE_NONADMIN)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    auth_tokens = relationship("UserAuth", back_populates="user", cascade="all, delete-orphan")
    questions = relationship("Question", back_populates="user", cascade="all, delete-orphan")
    answers = relationship("Answer", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (
        UniqueConstraint('user_name', name='uq_users_user_name'),
        UniqueConstraint('email', name='uq_users_email'),
    )
