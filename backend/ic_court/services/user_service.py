from sqlalchemy.future import select
from ic_court.core.security import ActorContext, CREATE_USER, ensure_allowed, hash_password
from ic_court.models.user import User
from ic_court.schemas.user import UserCreate
from ic_court.services.base import BaseService
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class UserService(BaseService):
    entity = "User"
    unique_columns = ("username", "email")

    async def create_user(self, data: UserCreate, actor: ActorContext) -> User:
        """
        Register a commission or external user.
        The plaintext password is hashed here and is never stored or returned.
        Username and email uniqueness is left to the database.
        """
        ensure_allowed(actor, CREATE_USER)

        user = User(
            username=data.username,
            email=data.email,
            full_name=data.full_name,
            role=data.role,
            phone=data.phone,
            password_hash=hash_password(data.password),
        )
        self.db.add(user)
        await self._commit("creation")
        await self.db.refresh(user)
        logger.info("Created user %s (%s)", user.id, user.role.value)
        return user

    async def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalars().first()

    async def get_users(self) -> List[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return result.scalars().all()
