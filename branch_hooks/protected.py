"""Protected-branch membership test used by the pre-push hook."""

from collections.abc import Sequence

DEFAULT_PROTECTED_BRANCHES = ("master", "develop")


def protected_branches(configured: Sequence[str] | None) -> Sequence[str]:
    """A non-empty configured list replaces the defaults outright."""
    if configured:
        return configured
    return DEFAULT_PROTECTED_BRANCHES


def is_protected(branch: str, configured: Sequence[str] | None = None) -> bool:
    # Exact match against the raw branch name: no case folding, no globs.
    return branch in protected_branches(configured)
