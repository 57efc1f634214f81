import logging

from sqlalchemy import delete, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from ..models import Subscription, User
from ._errors import storage_errors

logger = logging.getLogger(__name__)

async def create_user(session: AsyncSession, username: str, **attributes) -> User:
    """Creates a user and assigns it a new opaque user_id."""
    async with storage_errors(session, "create_user"):
        user = User(username=username, **attributes)
        session.add(user)
        await session.commit()
        await session.refresh(user)
    logger.info("Created user %s (id=%s)", user.username, user.user_id)
    return user

async def get_user(session: AsyncSession, user_id: str) -> User | None:
    async with storage_errors(session, "get_user"):
        result = await session.execute(select(User).filter_by(user_id=user_id))
        return result.scalar_one_or_none()

async def user_exists(session: AsyncSession, user_id: str) -> bool:
    async with storage_errors(session, "user_exists"):
        result = await session.execute(select(User.user_id).filter_by(user_id=user_id))
        return result.scalar_one_or_none() is not None

async def delete_user(session: AsyncSession, user_id: str) -> bool:
    """Deletes a user together with every subscription that references it."""
    async with storage_errors(session, "delete_user"):
        await session.execute(
            delete(Subscription).where(
                or_(
                    Subscription.subscriber_id == user_id,
                    Subscription.subscribe_to_id == user_id,
                )
            )
        )
        result = await session.execute(delete(User).where(User.user_id == user_id))
        deleted = result.rowcount
        await session.commit()
    if deleted > 0:
        logger.info("Deleted user %s", user_id)
        return True
    return False
