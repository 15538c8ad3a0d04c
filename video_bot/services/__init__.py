"""
Bot Services
Download and file management services.
"""

from video_bot.services.downloader import (
    DownloadError,
    new_job,
    build_command,
    run_download,
    cleanup,
)

__all__ = [
    'DownloadError',
    'new_job',
    'build_command',
    'run_download',
    'cleanup',
]
