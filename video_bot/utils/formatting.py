"""
Formatting Utilities
MarkdownV2 helpers and reply texts.
"""

from telegram import User


def escape_markdown_v2(text: str) -> str:
    """Escape special characters for MarkdownV2."""
    special_chars = ['\\', '_', '*', '[', ']', '(', ')', '~', '`', '>', '#', '+', '-', '=', '|', '{', '}', '.', '!']
    for char in special_chars:
        text = text.replace(char, f'\\{char}')
    return text


def mention(user: User) -> str:
    """Mention a user in MarkdownV2, by @username when they have one."""
    if user.username:
        return escape_markdown_v2(f"@{user.username}")
    return user.mention_markdown_v2()


def sent_by_caption(user: User) -> str:
    return f"Sent by: {mention(user)}"


def download_error_text(url: str, user: User) -> str:
    """Error reply for a failed download. Never includes exception details."""
    return (
        "❌ Unable to download video\\. File could be too large\\. "
        f"URL: {escape_markdown_v2(url)}\\. Sent by: {mention(user)}"
    )
