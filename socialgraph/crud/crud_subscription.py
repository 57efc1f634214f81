import logging

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from ..errors import DuplicateEntryError, NotFoundError
from ..models import Subscription, User
from . import crud_user
from ._errors import storage_errors

logger = logging.getLogger(__name__)

async def _require_user(session: AsyncSession, user_id: str) -> None:
    if not await crud_user.user_exists(session, user_id):
        logger.debug("User %s not found", user_id)
        raise NotFoundError()

async def is_subscribed(session: AsyncSession, subscriber_id: str, subscribe_to_id: str) -> bool:
    """Checks whether a live subscription exists for the ordered pair."""
    query = select(Subscription.id).where(
        Subscription.subscriber_id == subscriber_id,
        Subscription.subscribe_to_id == subscribe_to_id,
    )
    async with storage_errors(session, "is_subscribed"):
        result = await session.execute(query)
        return result.scalar_one_or_none() is not None

async def create_subscription(
    session: AsyncSession, subscriber_id: str, subscribe_to_id: str
) -> Subscription:
    """Subscribes subscriber_id to subscribe_to_id.

    Subscribing a user to itself is reported the same way as an unknown
    target: NotFoundError("User not found").
    """
    if subscriber_id == subscribe_to_id:
        logger.debug("Rejected self subscription for %s", subscriber_id)
        raise NotFoundError()
    await _require_user(session, subscribe_to_id)
    await _require_user(session, subscriber_id)

    if await is_subscribed(session, subscriber_id, subscribe_to_id):
        logger.debug("Subscription %s -> %s already exists", subscriber_id, subscribe_to_id)
        raise DuplicateEntryError()

    async with storage_errors(session, "create_subscription"):
        new_sub = Subscription(subscriber_id=subscriber_id, subscribe_to_id=subscribe_to_id)
        session.add(new_sub)
        try:
            await session.commit()
        except IntegrityError as exc:
            # Lost a race against a concurrent create, or an endpoint was deleted meanwhile.
            await session.rollback()
            if await is_subscribed(session, subscriber_id, subscribe_to_id):
                raise DuplicateEntryError() from exc
            raise NotFoundError() from exc
        await session.refresh(new_sub)

    logger.info("Created subscription %s -> %s", subscriber_id, subscribe_to_id)
    return new_sub

async def delete_subscription(session: AsyncSession, subscriber_id: str, subscribe_to_id: str) -> bool:
    """Removes a subscription.

    Returns False when the subscriber exists but there is nothing to remove;
    an unknown subscriber raises NotFoundError.
    """
    await _require_user(session, subscriber_id)

    query = delete(Subscription).where(
        Subscription.subscriber_id == subscriber_id,
        Subscription.subscribe_to_id == subscribe_to_id
    )
    async with storage_errors(session, "delete_subscription"):
        result = await session.execute(query)
        deleted = result.rowcount
        await session.commit()

    if deleted > 0:
        logger.info("Deleted subscription %s -> %s", subscriber_id, subscribe_to_id)
        return True
    return False

async def get_subscriptions(session: AsyncSession, subscriber_id: str) -> list[User]:
    """Users that subscriber_id subscribes to, oldest subscription first."""
    await _require_user(session, subscriber_id)

    query = (
        select(User)
        .join(Subscription, User.user_id == Subscription.subscribe_to_id)
        .where(Subscription.subscriber_id == subscriber_id)
        .order_by(Subscription.id)
    )
    async with storage_errors(session, "get_subscriptions"):
        result = await session.execute(query)
        return list(result.scalars().all())

async def get_subscribers(session: AsyncSession, subscribe_to_id: str) -> list[User]:
    """Users subscribed to subscribe_to_id, oldest subscription first."""
    await _require_user(session, subscribe_to_id)

    query = (
        select(User)
        .join(Subscription, User.user_id == Subscription.subscriber_id)
        .where(Subscription.subscribe_to_id == subscribe_to_id)
        .order_by(Subscription.id)
    )
    async with storage_errors(session, "get_subscribers"):
        result = await session.execute(query)
        return list(result.scalars().all())

async def get_number_of_subscriptions(session: AsyncSession, subscriber_id: str) -> int:
    await _require_user(session, subscriber_id)

    query = select(func.count()).select_from(Subscription).where(
        Subscription.subscriber_id == subscriber_id
    )
    async with storage_errors(session, "get_number_of_subscriptions"):
        result = await session.execute(query)
        return result.scalar_one()

async def get_number_of_subscribers(session: AsyncSession, subscribe_to_id: str) -> int:
    await _require_user(session, subscribe_to_id)

    query = select(func.count()).select_from(Subscription).where(
        Subscription.subscribe_to_id == subscribe_to_id
    )
    async with storage_errors(session, "get_number_of_subscribers"):
        result = await session.execute(query)
        return result.scalar_one()
