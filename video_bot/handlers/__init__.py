"""
Telegram Bot Handlers
Command and error handlers.
"""

from video_bot.handlers.download import download_command
from video_bot.handlers.errors import error_handler

__all__ = [
    'download_command',
    'error_handler',
]
