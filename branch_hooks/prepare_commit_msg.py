"""prepare-commit-msg hook that prefixes new commit messages from the branch name.

On ``feature/JIRA-302-some-description`` a plain ``git commit`` opens the
editor with ``JIRA-302 | some-description`` on the first line. Messages that
already come from somewhere (``-m``, a template, a merge, a squash or an
amend) are left alone.

    git config hooks.prepare-commit-msg.branchSeparator ':'
    git config hooks.prepare-commit-msg.enabled false    # turn the hook off
"""

import argparse
import sys
from pathlib import Path

import structlog

from branch_hooks import git_bindings
from branch_hooks.branch_meta import DEFAULT_SEPARATOR, extract, render
from branch_hooks.exit_codes import ExitCode, HookError
from branch_hooks.logs import configure_logging, log_args

PREPARE_COMMIT_MSG_ENABLED_DEFAULT = True
PREPARE_COMMIT_MSG_ENABLED_SETTING = "hooks.prepare-commit-msg.enabled"
SEPARATOR_SETTING = "hooks.prepare-commit-msg.branchSeparator"

logger = structlog.get_logger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="prepare-commit-msg", description="Git prepare-commit-msg hook"
    )
    parser.add_argument("commit_msg_file", nargs="?", help="File holding the commit message")
    parser.add_argument("commit_source", nargs="?", help="message, template, merge, squash or commit")
    parser.add_argument("commit_sha", nargs="?", help="Commit being amended, if any")
    # Extra arguments are ignored.
    return parser.parse_known_args(argv)[0]


def prepend_file(data: str, path: Path) -> None:
    """Put *data* on its own line ahead of the file's current contents."""
    with path.open(encoding="utf-8", newline="") as src:
        contents = src.read()
    with path.open("w", encoding="utf-8", newline="") as dest:
        dest.write(f"{data}\n{contents}")


def prepare_message(commit_msg_file: str | None, commit_source: str | None) -> ExitCode:
    repo = git_bindings.get_repository()

    enabled = git_bindings.get_config_bool(repo, PREPARE_COMMIT_MSG_ENABLED_SETTING)
    if not (PREPARE_COMMIT_MSG_ENABLED_DEFAULT if enabled is None else enabled):
        logger.warning(ExitCode.DISABLED.message)
        return ExitCode.DISABLED

    if commit_msg_file is None or commit_source is not None:
        logger.debug(ExitCode.OK.message)
        return ExitCode.OK

    if repo.workdir is None:
        raise HookError(ExitCode.NO_WORKING_DIRECTORY)

    path = repo.workdir / commit_msg_file
    logger.debug(f"Commit msg file: {path}")

    branch = git_bindings.get_branch_name(repo)
    separator = git_bindings.get_config_string(repo, SEPARATOR_SETTING)
    message = render(extract(branch), DEFAULT_SEPARATOR if separator is None else separator)

    try:
        prepend_file(message, path)
    except (OSError, UnicodeDecodeError) as e:
        raise HookError(ExitCode.FAILED_TO_WRITE_COMMIT_MSG, str(e)) from e

    logger.debug(ExitCode.OK.message)
    return ExitCode.OK


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    log_args(argv)
    args = parse_args(argv)

    try:
        return prepare_message(args.commit_msg_file, args.commit_source).code
    except HookError as e:
        if e.detail:
            logger.debug(e.detail)
        logger.error(e.exit_code.message)
        return e.exit_code.code


if __name__ == "__main__":
    sys.exit(main())
