from functools import partial
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.commands import management
from src.core.database import create_schema
from src.models.signup import Signup


@pytest.fixture
def cli(monkeypatch, async_engine, async_session_maker):
    """Point the management commands at the test database."""
    fake_engine = MagicMock()
    fake_engine.dispose = AsyncMock()
    monkeypatch.setattr(management, "engine", fake_engine)
    monkeypatch.setattr(management, "AsyncSessionLocal", async_session_maker)
    monkeypatch.setattr(management, "create_schema", partial(create_schema, async_engine))
    return fake_engine


class TestManagementCommands:
    """Test the management CLI."""

    @pytest.mark.asyncio
    async def test_no_command_prints_help(self, cli, capsys):
        assert await management.main([]) == 1
        assert "Usage:" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_unknown_command(self, cli, capsys):
        assert await management.main(["frobnicate"]) == 1
        assert "Unknown command: frobnicate" in capsys.readouterr().out
        cli.dispose.assert_called_once()

    @pytest.mark.asyncio
    async def test_init_db(self, cli, capsys):
        assert await management.main(["init-db"]) == 0
        assert "Schema ready." in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_stats(self, cli, async_session, capsys):
        async_session.add_all(
            [
                Signup(name="Ada", email="ada@example.com"),
                Signup(name="Grace", email="grace@example.com"),
            ]
        )
        await async_session.commit()

        assert await management.main(["stats"]) == 0
        assert "Total signups: 2" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_list_signups(self, cli, async_session, capsys):
        async_session.add(Signup(name="Ada", email="ada@example.com"))
        await async_session.commit()

        assert await management.main(["list-signups", "5"]) == 0
        out = capsys.readouterr().out
        assert "Ada" in out
        assert "<ada@example.com>" in out

    @pytest.mark.asyncio
    async def test_list_signups_empty(self, cli, capsys):
        assert await management.main(["list-signups"]) == 0
        assert "No signups yet." in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_list_signups_invalid_limit(self, cli, capsys):
        assert await management.main(["list-signups", "many"]) == 1
        assert "not a valid limit" in capsys.readouterr().out
