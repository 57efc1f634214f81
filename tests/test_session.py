import pytest

from socialgraph import session as db_session
from socialgraph.errors import ConfigurationError


@pytest.fixture(autouse=True)
async def _reset_engine():
    await db_session.dispose_engine()
    yield
    await db_session.dispose_engine()


async def test_missing_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ConfigurationError):
        db_session.get_engine()


async def test_engine_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'env.db'}")
    engine = db_session.get_engine()
    assert db_session.get_engine() is engine
    await db_session.init_db()
    assert (tmp_path / "env.db").exists()
    assert db_session.get_session_maker() is db_session.get_session_maker()


async def test_main_does_not_log_password(monkeypatch, tmp_path, caplog):
    import main

    async def init_db():
        pass

    monkeypatch.setattr(main, "init_db", init_db)
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite://user:hunter2@/{tmp_path / 'main.db'}")
    with caplog.at_level("INFO", logger="socialgraph"):
        await main.main()
    assert "hunter2" not in caplog.text
    assert "***" in caplog.text
