import os
import subprocess
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent


def run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout


@pytest.fixture()
def git():
    return run_git


@pytest.fixture()
def git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Environment isolated from the user's git config and any enclosing repository."""
    env = {
        "GIT_CONFIG_GLOBAL": os.devnull,
        "GIT_CONFIG_NOSYSTEM": "1",
        "GIT_CEILING_DIRECTORIES": str(tmp_path),
        "GIT_AUTHOR_NAME": "Hook Tester",
        "GIT_AUTHOR_EMAIL": "hooks@example.com",
        "GIT_COMMITTER_NAME": "Hook Tester",
        "GIT_COMMITTER_EMAIL": "hooks@example.com",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    pythonpath = [str(REPO_ROOT)]
    if os.environ.get("PYTHONPATH"):
        pythonpath.append(os.environ["PYTHONPATH"])
    monkeypatch.setenv("PYTHONPATH", os.pathsep.join(pythonpath))
    return dict(os.environ)


@pytest.fixture()
def empty_repo(tmp_path: Path, git_env) -> Path:
    """Freshly initialised repository whose master branch has no commits."""
    repo = tmp_path / "repo"
    repo.mkdir()
    run_git(repo, "init", "-q")
    run_git(repo, "symbolic-ref", "HEAD", "refs/heads/master")
    return repo


@pytest.fixture()
def repo(empty_repo: Path) -> Path:
    """Repository on master with one commit."""
    run_git(empty_repo, "commit", "-q", "--allow-empty", "-m", "initial")
    return empty_repo
