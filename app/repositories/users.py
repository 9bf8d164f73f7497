"""User repository: create-if-absent, role lookup and promotion."""

import logging
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.models import ADMIN_ROLE, User
from app.repositories.base import Repository

logger = logging.getLogger(__name__)


class UserRepository(Repository[User]):
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create_if_absent(self, doc: dict[str, Any]) -> tuple[User, bool]:
        """
        Insert a user unless one with the same email already exists.

        Returns:
            (user, created) where ``created`` is False for an existing record
        """
        existing = await self.get_by_email(doc["email"])
        if existing is not None:
            return existing, False

        try:
            user = await self.create(doc)
        except IntegrityError:
            # A concurrent sign-in inserted the same email first
            await self.session.rollback()
            existing = await self.get_by_email(doc["email"])
            if existing is None:
                raise
            return existing, False

        logger.info(f"User created: {user.email}")
        return user, True

    async def is_admin(self, email: str) -> bool:
        """Role is read on every call so a demotion applies immediately."""
        user = await self.get_by_email(email)
        return user is not None and user.is_admin

    async def promote_to_admin(self, id: str) -> int:
        return await self.update(id, {"role": ADMIN_ROLE})
