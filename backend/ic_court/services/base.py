from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from ic_court.core.exceptions import DuplicateError, NotFoundError
from ic_court.db.errors import FOREIGN_KEY_VIOLATION, UNIQUE_VIOLATION, classify_integrity_error
from typing import Awaitable, Callable, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class BaseService:
    entity: str = "Record"
    unique_columns: Tuple[str, ...] = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(
        self,
        action: str,
        missing_reference: Optional[Callable[[], Awaitable[NotFoundError]]] = None,
    ) -> None:
        """
        Commit the pending write, translating constraint violations.

        Unique violations become DuplicateError. Foreign key violations become
        the NotFoundError produced by `missing_reference`, since the database
        constraint is the final word on whether a referenced row exists.
        Anything else is logged and re-raised unchanged.
        """
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            kind, column = classify_integrity_error(e, self.unique_columns)
            if kind == UNIQUE_VIOLATION:
                logger.warning("%s %s rejected: duplicate %s", self.entity, action, column or "value")
                raise DuplicateError(self.entity, column) from e
            if kind == FOREIGN_KEY_VIOLATION and missing_reference is not None:
                error = await missing_reference()
                logger.warning("%s %s rejected: %s", self.entity, action, error)
                raise error from e
            logger.exception("%s %s failed", self.entity, action)
            raise
        except SQLAlchemyError:
            await self.db.rollback()
            logger.exception("%s %s failed", self.entity, action)
            raise
