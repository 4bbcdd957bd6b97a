"""Derive commit-message metadata from a branch name.

A branch such as ``feature/JIRA-302-some-description`` is split into a type
(``feature``), a ticket (``JIRA-302``) and a description
(``some-description``), which :func:`render` turns into the line prepended to
a new commit message.
"""

import re
import string
from dataclasses import dataclass

DEFAULT_SEPARATOR = "|"

TICKET_PATTERN = re.compile(r"[A-Z]{1,10}-?[A-Z]+-\d+")

# Bare branch names that count as a type rather than a description.
KEYWORD_BRANCHES = ("master", "main", "develop", "feature", "release", "hotfix")


@dataclass(frozen=True)
class BranchMetadata:
    branch_type: str = ""
    ticket: str = ""
    description: str = ""


def branch_type(branch: str) -> str:
    if "/" in branch:
        return branch.split("/")[0]
    if branch in KEYWORD_BRANCHES:
        return branch
    return ""


def ticket(branch: str) -> str:
    match = TICKET_PATTERN.search(branch)
    return match.group(0) if match else ""


def description(branch: str, branch_type: str, ticket: str) -> str:
    if "/" in branch:
        if not ticket:
            return branch.split("/")[1]
        parts = branch.split(ticket)
        rest = parts[1] if len(parts) > 1 else ""
        return rest.strip().strip(string.punctuation)

    if not ticket and not branch_type:
        return branch
    return ""


def extract(branch: str) -> BranchMetadata:
    """Classify *branch*; never fails, unparseable parts come back empty."""
    branch = branch.strip()
    kind = branch_type(branch)
    key = ticket(branch)
    return BranchMetadata(
        branch_type=kind,
        ticket=key,
        description=description(branch, kind, key),
    )


def render(meta: BranchMetadata, separator: str = DEFAULT_SEPARATOR) -> str:
    """Return the commit-message prefix for *meta*, or ``""`` for nothing."""
    if not meta.ticket and not meta.description:
        return ""
    if not meta.ticket:
        return f"{meta.description} {separator} "
    if not meta.description:
        return f"{meta.ticket} {separator} "
    return f"{meta.ticket} {separator} {meta.description}"
