"""
Error Handler
Logs exceptions raised while processing updates.
"""

from telegram.ext import ContextTypes

from video_bot.config import logger


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logger.error(f"Exception while handling update {update}: {context.error}", exc_info=context.error)
