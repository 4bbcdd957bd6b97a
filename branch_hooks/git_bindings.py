"""Thin wrappers over the ``git`` executable.

Repository and branch lookups raise :class:`HookError` because a hook cannot
do anything useful without them. Config lookups never raise: a missing key,
a malformed value or an undecodable value all read as ``None`` so callers can
fall back to their defaults.
"""

import os
import subprocess
from dataclasses import dataclass
from pathlib import Path

import structlog

from branch_hooks.exit_codes import ExitCode, HookError

logger = structlog.get_logger(__name__)

HEADS_PREFIX = b"refs/heads/"


@dataclass(frozen=True)
class Repository:
    git_dir: Path
    workdir: Path | None
    is_bare: bool

    @property
    def root(self) -> Path:
        """Directory git commands for this repository run from."""
        return self.workdir if self.workdir is not None else self.git_dir


def _git(args: list[str], cwd: str | os.PathLike[str]) -> subprocess.CompletedProcess[bytes]:
    return subprocess.run(["git", *args], cwd=cwd, capture_output=True)


def _stderr(result: subprocess.CompletedProcess[bytes]) -> str:
    return result.stderr.decode("utf-8", errors="replace").strip()


def _stdout_line(result: subprocess.CompletedProcess[bytes]) -> bytes:
    return result.stdout.removesuffix(b"\n")


def get_repository(path: str | os.PathLike[str] = ".") -> Repository:
    """Open the repository containing *path*."""
    try:
        result = _git(["rev-parse", "--absolute-git-dir", "--is-bare-repository"], path)
    except OSError as e:
        raise HookError(ExitCode.FAILED_TO_OPEN_REPOSITORY, str(e)) from e

    if result.returncode != 0:
        raise HookError(ExitCode.FAILED_TO_OPEN_REPOSITORY, _stderr(result))

    lines = result.stdout.splitlines()
    git_dir = Path(os.fsdecode(lines[0]))
    is_bare = lines[1] == b"true"

    workdir = None
    if not is_bare:
        toplevel = _git(["rev-parse", "--show-toplevel"], path)
        # Fails when run from inside the git directory itself.
        if toplevel.returncode == 0:
            workdir = Path(os.fsdecode(_stdout_line(toplevel)))

    return Repository(git_dir=git_dir, workdir=workdir, is_bare=is_bare)


def get_branch_name(repo: Repository) -> str:
    """Return the short name of the branch HEAD points at."""
    head = _git(["symbolic-ref", "-q", "HEAD"], repo.root)
    if head.returncode != 0:
        commit = _git(["rev-parse", "-q", "--verify", "HEAD^{commit}"], repo.root)
        if commit.returncode == 0:
            raise HookError(ExitCode.UNKNOWN_BRANCH, "HEAD is detached")
        raise HookError(ExitCode.INVALID_BRANCH, _stderr(head))

    ref = _stdout_line(head)
    if not ref.startswith(HEADS_PREFIX):
        raise HookError(ExitCode.UNKNOWN_BRANCH, os.fsdecode(ref))

    if _git(["rev-parse", "-q", "--verify", "HEAD"], repo.root).returncode != 0:
        raise HookError(ExitCode.EMPTY_BRANCH, os.fsdecode(ref))

    try:
        return ref[len(HEADS_PREFIX):].decode("utf-8")
    except UnicodeDecodeError as e:
        raise HookError(ExitCode.BAD_BRANCH_NAME, str(e)) from e


def _get_config(repo: Repository, key: str, kind: str, extra: list[str]) -> str | None:
    result = _git(["config", *extra, "--get", key], repo.root)
    if result.returncode != 0:
        reason = _stderr(result) or "key is not set"
        logger.debug(f"Could not get {kind} value from key {key}: {reason}")
        return None

    try:
        return _stdout_line(result).decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug(f"Could not get {kind} value from key {key}: {e}")
        return None


def get_config_bool(repo: Repository, key: str) -> bool | None:
    value = _get_config(repo, key, "bool", ["--type=bool"])
    if value is None:
        return None
    return value == "true"


def get_config_string(repo: Repository, key: str) -> str | None:
    return _get_config(repo, key, "string", [])


def get_multi_config_string(repo: Repository, key: str) -> list[str] | None:
    """Comma-split form of :func:`get_config_string`; empty segments are kept."""
    value = get_config_string(repo, key)
    if value is None:
        return None
    return value.split(",")
