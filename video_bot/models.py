"""
Bot Models
Data classes and type definitions.
"""

import os
import uuid
from dataclasses import dataclass


@dataclass
class DownloadJob:
    """A single /download invocation and the temp file it owns."""
    url: str
    path: str

    @classmethod
    def create(cls, url: str, directory: str) -> "DownloadJob":
        """Create a job with a temp filename unique to this invocation."""
        return cls(url=url, path=os.path.join(directory, f"video_{uuid.uuid4()}.mp4"))

    @property
    def part_path(self) -> str:
        # yt-dlp writes in-progress data here
        return self.path + ".part"

    @property
    def exists(self) -> bool:
        return os.path.isfile(self.path)
