"""
Downloader Service
Runs yt-dlp for a single job and cleans up the files it leaves behind.
"""

import os
import asyncio
from typing import List, Optional

from video_bot.config import logger, YTDLP_BINARY, MAX_FILESIZE, DOWNLOAD_DIR
from video_bot.models import DownloadJob


class DownloadError(Exception):
    """Raised when yt-dlp did not produce a usable file."""


def new_job(url: str, directory: Optional[str] = None) -> DownloadJob:
    """Create a download job in the download folder."""
    return DownloadJob.create(url, directory or DOWNLOAD_DIR)


def build_command(job: DownloadJob) -> List[str]:
    """Build the yt-dlp argument list for a job."""
    return [
        YTDLP_BINARY,
        "-f", "mp4",
        "-o", job.path,
        job.url,
        "--no-playlist",
        "--max-filesize", MAX_FILESIZE,
    ]


async def run_download(job: DownloadJob) -> str:
    """
    Run yt-dlp for the job and wait for it to exit.
    Returns the path of the downloaded file.
    Raises DownloadError on a nonzero exit or when no file was written.
    """
    cmd = build_command(job)
    logger.info(f"Starting download: {job.url} -> {job.path}")

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()

    if stdout:
        logger.debug(f"yt-dlp stdout: {stdout.decode(errors='replace').strip()}")
    if stderr:
        logger.debug(f"yt-dlp stderr: {stderr.decode(errors='replace').strip()}")

    if process.returncode != 0:
        raise DownloadError(f"yt-dlp exited with code {process.returncode}")

    # --max-filesize skips oversized files without failing
    if not job.exists:
        raise DownloadError(f"yt-dlp did not produce {job.path}")

    logger.info(f"Download finished: {job.path}")
    return job.path


def cleanup(job: DownloadJob) -> None:
    """Remove the job's file and its .part sidecar if present."""
    for path in (job.path, job.part_path):
        if not os.path.exists(path):
            continue
        try:
            os.remove(path)
        except OSError as e:
            logger.error(f"Error removing temp file {path}: {e}")
