"""pre-push hook that refuses to push from a protected branch.

Install by linking the ``pre-push`` console script into ``.git/hooks/``.
Protected branches default to master and develop; override them with a
comma-separated list::

    git config hooks.pre-push.protectedBranches main,release
    git config hooks.pre-push.enabled false    # turn the hook off
"""

import argparse
import sys

import structlog

from branch_hooks import git_bindings
from branch_hooks.exit_codes import ExitCode, HookError
from branch_hooks.logs import configure_logging, log_args
from branch_hooks.protected import is_protected, protected_branches

PRE_PUSH_ENABLED_DEFAULT = True
PRE_PUSH_ENABLED_SETTING = "hooks.pre-push.enabled"
PROTECTED_BRANCHES_SETTING = "hooks.pre-push.protectedBranches"

logger = structlog.get_logger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pre-push", description="Git pre-push hook")
    parser.add_argument("remote_name", nargs="?", help="Name of the remote being pushed to")
    parser.add_argument("remote_url", nargs="?", help="URL of the remote being pushed to")
    # Extra arguments are ignored.
    return parser.parse_known_args(argv)[0]


def check_push() -> ExitCode:
    repo = git_bindings.get_repository()
    if repo.is_bare:
        raise HookError(ExitCode.REPOSITORY_IS_BARE)

    enabled = git_bindings.get_config_bool(repo, PRE_PUSH_ENABLED_SETTING)
    if not (PRE_PUSH_ENABLED_DEFAULT if enabled is None else enabled):
        logger.warning(ExitCode.DISABLED.message)
        return ExitCode.DISABLED

    configured = git_bindings.get_multi_config_string(repo, PROTECTED_BRANCHES_SETTING)
    branch = git_bindings.get_branch_name(repo)

    logger.debug(f"current branch: {branch}")
    logger.debug(f"protected branches: {list(protected_branches(configured))}")

    if is_protected(branch, configured):
        logger.error(f'branch "{branch}" is a protected branch, cancelling push')
        raise HookError(ExitCode.PROTECTED_BRANCH, branch)

    logger.debug(ExitCode.OK.message)
    return ExitCode.OK


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    log_args(argv)
    parse_args(argv)

    try:
        return check_push().code
    except HookError as e:
        if e.detail:
            logger.debug(e.detail)
        logger.error(e.exit_code.message)
        return e.exit_code.code


if __name__ == "__main__":
    sys.exit(main())
