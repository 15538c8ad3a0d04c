import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import User

# Keep config deterministic regardless of the host environment
os.environ.pop("TELEGRAM_BOT_TOKEN", None)
os.environ["DOWNLOAD_DIR"] = "."


@pytest.fixture
def download_dir(tmp_path, monkeypatch):
    """Point the downloader at a temporary folder."""
    from video_bot.services import downloader

    monkeypatch.setattr(downloader, "DOWNLOAD_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def telegram_user():
    return User(id=42, first_name="User", is_bot=False, username="user")


@pytest.fixture
def make_update(telegram_user):
    """Build a mocked /download update."""

    def _make(text="/download https://example.com/v.mp4"):
        placeholder = MagicMock()
        placeholder.delete = AsyncMock()

        message = MagicMock()
        message.text = text
        message.reply_text = AsyncMock(side_effect=[placeholder, MagicMock(), MagicMock()])
        message.reply_video = AsyncMock()

        update = MagicMock()
        update.effective_message = message
        update.effective_user = telegram_user
        update.effective_chat.id = 1001
        update.placeholder = placeholder
        return update

    return _make


@pytest.fixture
def make_context():
    def _make(args):
        context = MagicMock()
        context.args = args
        return context

    return _make
