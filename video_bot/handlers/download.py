"""
Download Handler
Handles /download <url>: runs yt-dlp and replies with the video.
"""

from typing import Optional

from telegram import Message, Update
from telegram.ext import ContextTypes
from telegram.error import TelegramError

from video_bot.config import logger, DOWNLOAD_COMMAND
from video_bot.services import new_job, run_download, cleanup
from video_bot.utils import sent_by_caption, download_error_text, escape_markdown_v2


def get_command_name(message: Message) -> Optional[str]:
    """Return the command of a message, without the leading / and @botname."""
    if not message.text or not message.text.startswith("/"):
        return None
    return message.text.split()[0][1:].split("@")[0].lower()


async def _dismiss(placeholder: Message) -> None:
    """Delete the placeholder acknowledgement."""
    try:
        await placeholder.delete()
    except TelegramError as e:
        logger.warning(f"Could not delete placeholder message: {e}")


async def download_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /download command."""
    message = update.effective_message
    if message is None or get_command_name(message) != DOWNLOAD_COMMAND:
        return

    if not context.args:
        await message.reply_text(
            "⚠️ Please provide a video URL\\!\n\n"
            "*Usage:*\n"
            f"`/{escape_markdown_v2(DOWNLOAD_COMMAND)} <URL>`",
            parse_mode="MarkdownV2",
        )
        return

    url = context.args[0]
    user = update.effective_user
    chat_id = update.effective_chat.id

    logger.info(f"Download requested by chat ID {chat_id}: {url}")

    # Reply right away, the download may take a while
    placeholder = await message.reply_text("⏳ Downloading your video...")

    job = new_job(url)
    try:
        path = await run_download(job)
        with open(path, "rb") as video:
            await message.reply_video(
                video=video,
                caption=sent_by_caption(user),
                parse_mode="MarkdownV2",
                supports_streaming=True,
            )
        logger.info(f"Video sent to chat ID {chat_id}: {url}")
    except Exception as e:
        logger.error(f"Error downloading {url} for chat ID {chat_id}: {e}")
        await message.reply_text(download_error_text(url, user), parse_mode="MarkdownV2")
    finally:
        cleanup(job)

    await _dismiss(placeholder)
