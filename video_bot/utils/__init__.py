"""
Bot Utilities
Helper functions and utilities.
"""

from video_bot.utils.formatting import (
    escape_markdown_v2,
    mention,
    sent_by_caption,
    download_error_text,
)

__all__ = [
    'escape_markdown_v2',
    'mention',
    'sent_by_caption',
    'download_error_text',
]
