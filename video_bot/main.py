#!/usr/bin/env python3
"""
Telegram Video Download Bot
Downloads videos with yt-dlp and sends them back to the chat.
"""

import asyncio
import signal
from typing import Optional

from telegram import Update, BotCommand
from telegram.ext import Application, CommandHandler, filters
from telegram.error import TelegramError

from video_bot.config import (
    logger,
    TELEGRAM_BOT_TOKEN,
    MAX_CONCURRENT_DOWNLOADS,
    DOWNLOAD_COMMAND,
    DOWNLOAD_COMMAND_DESCRIPTION,
)
from video_bot.handlers import download_command, error_handler


async def setup_bot_commands(application: Application) -> None:
    """Set up bot commands for the menu."""
    commands = [
        BotCommand(DOWNLOAD_COMMAND, DOWNLOAD_COMMAND_DESCRIPTION),
    ]
    try:
        # set_my_commands replaces the whole list, so repeating it is harmless
        await application.bot.set_my_commands(commands)
        logger.info("Bot commands registered")
    except TelegramError as e:
        logger.error(f"Error registering bot commands: {e}")


def build_application(token: str) -> Application:
    """Create the application and register handlers."""
    application = (
        Application.builder()
        .token(token)
        .concurrent_updates(MAX_CONCURRENT_DOWNLOADS)
        .build()
    )

    # Edited messages would otherwise trigger a second download
    application.add_handler(
        CommandHandler(DOWNLOAD_COMMAND, download_command, filters=filters.UpdateType.MESSAGE)
    )
    application.add_error_handler(error_handler)
    return application


async def _disconnect(application: Application) -> None:
    """Stop polling and release the application. Errors are only logged."""
    try:
        if application.updater and application.updater.running:
            await application.updater.stop()
    except Exception as e:
        logger.error(f"Error while stopping updater: {e}")

    try:
        if application.running:
            await application.stop()
    except Exception as e:
        logger.error(f"Error while stopping application: {e}")

    try:
        await application.shutdown()
        logger.info("Bot disconnected")
    except Exception as e:
        logger.error(f"Error while disconnecting: {e}")


async def run(stop_event: asyncio.Event, token: Optional[str] = None) -> None:
    """Connect, serve until stop_event is set, then disconnect."""
    if token is None:
        token = TELEGRAM_BOT_TOKEN
    if not token:
        logger.error("TELEGRAM_BOT_TOKEN environment variable is not set, not connecting")
        return

    application = build_application(token)
    try:
        # initialize() logs in; a rejected token raises here
        await application.initialize()
        await application.start()
        await application.updater.start_polling(allowed_updates=Update.ALL_TYPES)
        await setup_bot_commands(application)

        logger.info("Bot is running...")
        await stop_event.wait()
    finally:
        await _disconnect(application)


async def _serve() -> None:
    stop_event = asyncio.Event()

    def request_shutdown() -> None:
        logger.info("Shutdown requested...")
        stop_event.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, request_shutdown)

    await run(stop_event)


def main() -> None:
    """Start the bot."""
    logger.info("Starting Telegram Video Download Bot...")
    asyncio.run(_serve())


if __name__ == "__main__":
    main()
