"""
User directory: persistence-backed lookup and mutation of user records.

Lookups return the User or None and never raise for "not found".
"""
from typing import Optional
import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import EmailRequired, UserAlreadyExists
from .models import User, utcnow

logger = logging.getLogger(__name__)


class UserDirectory:
    def __init__(self, db: Session):
        self.db = db

    # ---------------- read operations ----------------

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_verification_token(self, token: str) -> Optional[User]:
        return self.db.query(User).filter(User.email_verification_token == token).first()

    # ---------------- write operations ----------------

    def create(self, **fields) -> User:
        """
        Persist a new user.

        Generates `id` and timestamps when the caller does not supply them and
        defaults `name` to the local part of the email.

        Raises:
            EmailRequired: no email given
            UserAlreadyExists: the email unique constraint rejected the insert
        """
        email = fields.get("email")
        if not email:
            raise EmailRequired()

        if not fields.get("name"):
            fields["name"] = email.split("@")[0]

        now = utcnow()
        fields.setdefault("id", str(uuid.uuid4()))
        fields.setdefault("created_at", now)
        fields.setdefault("updated_at", fields["created_at"])

        user = User(**fields)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("User creation rejected by unique constraint: email=%s", email)
            raise UserAlreadyExists() from exc
        self.db.refresh(user)

        logger.info("User created: user_id=%s email=%s", user.id, user.email)
        return user

    def update(self, user_id: str, **fields) -> Optional[User]:
        """Merge `fields` into the user and return it, or None for an unknown id."""
        user = self.find_by_id(user_id)
        if user is None:
            return None

        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = utcnow()

        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user_id: str) -> bool:
        """Remove a user. Only used to undo a registration whose verification mail failed."""
        user = self.find_by_id(user_id)
        if user is None:
            return False

        self.db.delete(user)
        self.db.commit()
        logger.info("User deleted: user_id=%s", user_id)
        return True
