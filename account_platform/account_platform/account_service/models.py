from sqlalchemy import Column, String, DateTime, Enum
from datetime import datetime, timezone
import enum
import uuid

from .db import Base


def utcnow() -> datetime:
    """Naive UTC now, matching what SQLite hands back for DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class UserRole(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=True)
    name = Column(String, nullable=True)
    role = Column(Enum(UserRole, name="user_role"), default=UserRole.USER, nullable=False)

    # Email verification
    email_verified_at = Column(DateTime, nullable=True)
    email_verification_token = Column(String, unique=True, index=True, nullable=True)
    email_verification_token_expires_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    @property
    def display_name(self) -> str:
        return self.name or self.email.split("@")[0]

    def to_dict(self) -> dict:
        """
        Public representation used by API responses. Never includes the password hash.
        """
        return {
            "id": self.id,
            "email": self.email,
            "name": self.display_name,
            "role": self.role.value if self.role else UserRole.USER.value,
        }
