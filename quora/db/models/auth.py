import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .base import Base, now_utc


class UserAuth(Base):
    """One sign-in session: the hashed access token plus its lifetime."""

    __tablename__ = 'user_auth'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    # Token identity and secret hash (never store raw secret)
    token_id = Column(String(64), nullable=False)
    token_hash = Column(Text, nullable=False)

    login_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    logout_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="auth_tokens")

    __table_args__ = (
        Index('ix_user_auth_token_id', 'token_id', unique=True),
        Index('idx_user_auth_user_login', 'user_id', 'login_at'),
    )
