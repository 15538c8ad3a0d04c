"""Stand-ins for the yt-dlp process."""

from pathlib import Path


class FakeProcess:
    def __init__(self, returncode, output_path=None, content=b"video", part=False):
        self.returncode = returncode
        self._output_path = output_path
        self._content = content
        self._part = part

    async def communicate(self):
        if self._output_path and self._content is not None:
            Path(self._output_path).write_bytes(self._content)
        if self._output_path and self._part:
            Path(self._output_path + ".part").write_bytes(b"partial")
        return b"[download] done", b""


def fake_exec(returncode=0, write_file=True, part=False, calls=None):
    """Return a create_subprocess_exec replacement that mimics yt-dlp."""

    async def _exec(*cmd, **kwargs):
        if calls is not None:
            calls.append(list(cmd))
        output_path = cmd[cmd.index("-o") + 1]
        return FakeProcess(
            returncode,
            output_path=output_path,
            content=b"video" if write_file else None,
            part=part,
        )

    return _exec


def missing_binary():
    async def _exec(*cmd, **kwargs):
        raise FileNotFoundError(f"No such file or directory: '{cmd[0]}'")

    return _exec
