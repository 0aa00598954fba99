"""Locating, downloading and running the yt-dlp executable."""

from __future__ import annotations

import os
import platform
import subprocess
from pathlib import Path
from typing import BinaryIO

import requests

_RELEASE_URL = "https://github.com/yt-dlp/yt-dlp/releases/latest/download/"


class YtDlpError(Exception):
    """yt-dlp could not be fetched or reported an error."""


def ytdlp_executable_name(system: str | None = None) -> str:
    """Release asset name of yt-dlp for ``system`` (default: this machine)."""
    name = (system or platform.system()).lower()
    if name == "windows":
        return "yt-dlp.exe"
    if name == "darwin":
        return "yt-dlp_macos"
    return "yt-dlp"


def cache_dir() -> Path:
    """The cache directory, created if it does not exist."""
    directory = Path.home() / ".cache" / "ytt"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ytdlp_path() -> Path:
    """Where the yt-dlp executable is kept."""
    return cache_dir() / ytdlp_executable_name()


def _fetch(url: str, out: BinaryIO, name: str) -> None:
    try:
        with requests.get(url, stream=True, timeout=60) as resp:
            if resp.status_code != 200:
                raise YtDlpError(f"bad status: {resp.status_code} {resp.reason}")
            length = int(resp.headers.get("Content-Length") or 0)
            print(f"found {name} {length // 1024 // 1024} MB")
            for chunk in resp.iter_content(chunk_size=1 << 16):
                out.write(chunk)
    except requests.RequestException as exc:
        raise YtDlpError("http request failed") from exc


def download_ytdlp(path: str | Path | None = None, url: str | None = None) -> bool:
    """Download yt-dlp to ``path`` unless a file is already there.

    Returns True if a download happened, False if the file already existed.
    """
    target = Path(path) if path is not None else ytdlp_path()
    source = url or _RELEASE_URL + ytdlp_executable_name()
    try:
        out = open(target, "xb")
    except FileExistsError:
        return False
    try:
        with out:
            os.chmod(target, 0o755)
            print("downloading ytdlp, please wait")
            _fetch(source, out, target.name)
    except BaseException:
        target.unlink(missing_ok=True)
        raise
    print("downloaded at", target)
    return True


def run_ytdlp(*args: str, executable: str | Path | None = None) -> str:
    """Run yt-dlp quietly with ``args`` and return its standard output.

    Anything written to standard error, or a failing exit, raises YtDlpError.
    """
    exe = str(executable) if executable is not None else str(ytdlp_path())
    command = [exe, *args, "--quiet", "--no-warnings"]
    try:
        proc = subprocess.run(
            command, capture_output=True, text=True, encoding="utf-8", errors="replace", check=False
        )
    except OSError as exc:
        raise YtDlpError("ytdlp error") from exc
    if proc.stderr:
        raise YtDlpError(proc.stderr)
    if proc.returncode != 0:
        raise YtDlpError(f"ytdlp error: exit status {proc.returncode}")
    return proc.stdout