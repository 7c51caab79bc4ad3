"""General helpers for blog projects: text, files, validation and git."""

from __future__ import annotations

import math
import re
import shutil
import subprocess
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

WORDS_PER_MINUTE = 200
_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


def slugify(text: str) -> str:
    """Convert a title to a URL-friendly slug."""
    mapped = "".join(c if c.isalnum() else "-" for c in text.lower())
    return "-".join(part for part in mapped.split("-") if part)


def calculate_reading_time(content: str) -> int:
    """Estimated reading time in minutes, never less than one."""
    word_count = len(content.split())
    return max(math.ceil(word_count / WORDS_PER_MINUTE), 1)


def extract_excerpt(content: str, max_words: int) -> str:
    """First ``max_words`` words of the content, with "..." if cut short."""
    words = content.split()
    excerpt = " ".join(words[:max_words])
    if len(words) > max_words:
        excerpt += "..."
    return excerpt


def ensure_dir_exists(path: PathLike) -> None:
    """Create the directory and its parents if it does not exist."""
    path = Path(path)
    if path.exists():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"Failed to create directory: {path}") from exc


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy a file, creating the destination's directory if needed."""
    src, dst = Path(src), Path(dst)
    ensure_dir_exists(dst.parent)
    try:
        shutil.copy(src, dst)
    except OSError as exc:
        raise OSError(f"Failed to copy {src} to {dst}") from exc


def write_file(path: PathLike, content: str) -> None:
    """Write text to a file, creating its directory if needed."""
    path = Path(path)
    ensure_dir_exists(path.parent)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Failed to write file: {path}") from exc


def read_file(path: PathLike) -> str:
    """Read a whole text file."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OSError(f"Failed to read file: {path}") from exc


def get_file_extension(path: PathLike) -> str | None:
    """Lower-cased extension without the dot, or None if there is none."""
    suffix = Path(path).suffix
    return suffix[1:].lower() if suffix else None


def _valid_authority(rest: str) -> bool:
    rest = rest.lstrip("/\\")
    authority = re.split(r"[/?#\\]", rest, maxsplit=1)[0]
    hostport = authority.rpartition("@")[2]
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            return False
        host, port_part = hostport[: end + 1], hostport[end + 1 :]
        if port_part and not port_part.startswith(":"):
            return False
        port = port_part[1:]
    else:
        host, _, port = hostport.partition(":")
    if not host or host == "[]":
        return False
    if port:
        if not port.isdigit() or int(port) > 65535:
            return False
    return True


def is_valid_url(url: str) -> bool:
    """Whether the string parses as an absolute URL."""
    url = url.strip(" \t\n\r\x00")
    scheme, sep, rest = url.partition(":")
    if not sep or not _SCHEME_RE.match(scheme):
        return False
    if scheme.lower() in _HOST_SCHEMES:
        return _valid_authority(rest)
    return True


def format_file_size(size: int) -> str:
    """Human-readable size, e.g. ``1.5 KB``."""
    value = float(size)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(_SIZE_UNITS) - 1:
        value /= 1024.0
        unit_index += 1
    if unit_index == 0:
        return f"{int(value)} {_SIZE_UNITS[0]}"
    return f"{value:.1f} {_SIZE_UNITS[unit_index]}"


def format_timestamp(timestamp: datetime) -> str:
    """Format a timestamp in UTC for display; naive values are taken as UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def is_valid_github_repo_name(name: str) -> bool:
    """Check a GitHub repository name."""
    if not name or len(name.encode("utf-8")) > 100:
        return False
    if name.startswith("-") or name.endswith("-"):
        return False
    return all(c.isalnum() or c in "-_." for c in name)


def is_valid_github_username(username: str) -> bool:
    """Check a GitHub user name."""
    if not username or len(username.encode("utf-8")) > 39:
        return False
    if username.startswith("-") or username.endswith("-") or "--" in username:
        return False
    return all(c.isalnum() or c == "-" for c in username)


def unique_filename(path: PathLike) -> str:
    """The path itself if free, otherwise the first free ``stem-N.ext``."""
    path = Path(path)
    if not path.exists():
        return str(path)
    stem = path.stem
    extension = path.suffix
    parent = path.parent
    for i in range(1, 1000):
        candidate = parent / f"{stem}-{i}{extension}"
        if not candidate.exists():
            return str(candidate)
    return str(parent / f"{stem}-{int(time.time())}{extension}")


def parse_tags(tags_str: str) -> list[str]:
    """Split a comma-separated tag list, dropping empty entries."""
    return [tag for tag in (part.strip() for part in tags_str.split(",")) if tag]


def open_browser(url: str) -> None:
    """Open the URL in the system's default browser."""
    if sys.platform == "darwin":
        command, system = ["open", url], "macOS"
    elif sys.platform.startswith("win"):
        command, system = ["cmd", "/C", "start", url], "Windows"
    elif sys.platform.startswith("linux"):
        command, system = ["xdg-open", url], "Linux"
    else:
        return
    try:
        subprocess.Popen(command)
    except OSError as exc:
        raise OSError(f"Failed to open browser on {system}") from exc


def is_git_available() -> bool:
    """Whether a ``git`` executable can be run."""
    try:
        subprocess.run(["git", "--version"], capture_output=True)
    except OSError:
        return False
    return True


def _run_git(path: PathLike, args: list[str], failure: str) -> None:
    try:
        subprocess.run(["git", *args], cwd=Path(path), capture_output=True)
    except OSError as exc:
        raise OSError(failure) from exc


def init_git_repo(path: PathLike) -> None:
    """Run ``git init`` in the directory."""
    if not is_git_available():
        raise RuntimeError(
            "Git is not available. Please install git to use version control features."
        )
    _run_git(path, ["init"], "Failed to initialize git repository")


def git_add_all(path: PathLike) -> None:
    """Stage every file in the repository."""
    _run_git(path, ["add", "."], "Failed to add files to git")


def git_initial_commit(path: PathLike, message: str) -> None:
    """Create a commit with the given message."""
    _run_git(path, ["commit", "-m", message], "Failed to create initial git commit")


def git_set_remote(path: PathLike, remote_url: str) -> None:
    """Add ``origin`` pointing at the remote URL."""
    _run_git(path, ["remote", "add", "origin", remote_url], "Failed to set git remote")


def git_push(path: PathLike, branch: str) -> None:
    """Push the branch to ``origin`` and set it as upstream."""
    _run_git(path, ["push", "-u", "origin", branch], "Failed to push to git remote")