import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import StorageError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Roll back and re-raise database failures as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("%s failed", operation)
        raise StorageError(f"{operation} failed: {exc}") from exc
