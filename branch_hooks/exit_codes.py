"""Process exit codes shared by every hook.

Git only looks at whether a hook exits zero, but each terminal condition gets
its own code so a failing hook can be diagnosed from ``$?`` alone.
"""

from enum import Enum


class ExitCode(Enum):
    OK = (0, "Success!")
    DISABLED = (0, "Disabled! Skipping git hook")
    FAILED_TO_OPEN_REPOSITORY = (1, "Not a git directory")
    REPOSITORY_IS_BARE = (2, "Repository is empty")
    NO_WORKING_DIRECTORY = (3, "Repository has no working directory")
    INVALID_BRANCH = (4, "Invalid branch")
    EMPTY_BRANCH = (5, "Branch has no commits")
    UNKNOWN_BRANCH = (6, "HEAD is not a branch")
    BAD_BRANCH_NAME = (7, "Branch name is invalid UTF-8")
    PROTECTED_BRANCH = (8, "HEAD refers to a protected branch")
    FAILED_TO_WRITE_COMMIT_MSG = (9, "Failed to write commit message to file")

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message


class HookError(Exception):
    """Terminal failure: the hook must stop and exit with ``exit_code``."""

    def __init__(self, exit_code: ExitCode, detail: str = "") -> None:
        super().__init__(exit_code.message)
        self.exit_code = exit_code
        self.detail = detail
