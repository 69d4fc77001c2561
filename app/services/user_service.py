import logging

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.database import transaction
from app.exceptions import ConflictError, NotFoundError
from app.models.base import utc_now
from app.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Maps verified upstream identities onto local user rows."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_uid(self, uid: str) -> Optional[User]:
        return self.session.exec(
            select(User).where(User.external_uid == uid)
        ).first()

    def find_user(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_or_create(
        self,
        *,
        uid: str,
        email: str,
        name: Optional[str] = None,
    ) -> User:
        user = self.find_by_uid(uid)
        if user:
            return user

        user = User(
            external_uid=uid,
            email=email,
            name=name or email.split("@")[0],
        )
        try:
            with transaction(self.session):
                self.session.add(user)
        except IntegrityError:
            # Lost a race with a concurrent first request, or the email is
            # already bound to another identity.
            existing = self.find_by_uid(uid)
            if existing:
                return existing
            logger.warning(f"Email {email} already belongs to another identity")
            raise ConflictError(
                f"A user with email {email} already exists.",
                details={"email": email},
            )
        self.session.refresh(user)

        logger.info(f"Created user {user.id} for identity {uid}")
        return user

    def update_profile(self, user_id: int, changes: dict) -> User:
        user = self.find_user(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found")

        with transaction(self.session):
            for field, value in changes.items():
                setattr(user, field, value)
            user.updated_at = utc_now()
            self.session.add(user)
        self.session.refresh(user)
        return user
