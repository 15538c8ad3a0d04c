"""
Bot Configuration
Environment variables and global settings.
"""

import os
import logging

# Configure logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO
)
logger = logging.getLogger(__name__)

# Reduce httpx logging verbosity (suppress polling requests)
logging.getLogger("httpx").setLevel(logging.WARNING)

# Configuration from environment variables
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
YTDLP_BINARY = os.getenv("YTDLP_BINARY", "yt-dlp")
MAX_FILESIZE = os.getenv("MAX_FILESIZE", "25M")
DOWNLOAD_DIR = os.getenv("DOWNLOAD_DIR", ".")

# Upper bound on handlers running at once (same default as concurrent_updates(True))
MAX_CONCURRENT_DOWNLOADS = int(os.getenv("MAX_CONCURRENT_DOWNLOADS", "256"))

# Command exposed to users
DOWNLOAD_COMMAND = "download"
DOWNLOAD_COMMAND_DESCRIPTION = "Download a video"
