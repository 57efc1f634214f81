"""Shared fixtures: a fresh SQLite database per test."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from socialgraph.crud import crud_user
from socialgraph.models import User
from socialgraph.session import create_engine, create_session_maker, init_db

NOOB = {
    "username": "Noob Nie",
    "alias": "the noobie",
    "email": "noob@gmail.com",
    "password": "secretpass",
    "access_token": "atoken",
    "platform_type": "facebook",
    "platform_id": "asdfadf-asdfasdf-asdfasdfaf-dfddf",
    "description": "noob has a noobie description",
}

PRO = {
    "username": "Miss Pro",
    "alias": "Pro in the wonderland",
    "email": "pro@prototype.com",
    "password": "generated",
    "access_token": "anaccesstoken",
    "platform_type": "facebook",
    "platform_id": "45454545454",
    "description": "pro is too cool for description",
}

WORKAHOLIC = {
    "username": "Mr Workaholic",
    "alias": "workaholic",
    "email": "workaholic@office.com",
    "password": "generated",
    "access_token": "another accesstoken",
    "platform_type": "facebook",
    "platform_id": "22222222222",
    "description": "workaholic is too busy for description",
}

INVALID_ID = "00000000000000000000000000000000"


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'socialgraph.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_maker(engine)


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def user1(session: AsyncSession) -> User:
    return await crud_user.create_user(session, **NOOB)


@pytest.fixture
async def user2(session: AsyncSession) -> User:
    return await crud_user.create_user(session, **PRO)


@pytest.fixture
async def user3(session: AsyncSession) -> User:
    return await crud_user.create_user(session, **WORKAHOLIC)


@pytest.fixture
def invalid_id() -> str:
    return INVALID_ID
