"""Backup branch naming rules.

A backup branch is named `<parent>-backup` or `<parent>-backup<N>` where N is
one or more digits. Only one suffix is stripped: the parent of
`feature-backup-backup2` is `feature-backup`, not `feature`.
"""

from typing import Optional

from git_cleanup.constants import BACKUP_SUFFIX


def strip_backup_number(name: str) -> str:
    """Remove trailing digits from `name`."""
    return name.rstrip("0123456789")


def backup_parent(name: str) -> Optional[str]:
    """Return the parent branch name if `name` is a backup branch, else None."""
    stem = strip_backup_number(name)
    if not stem.endswith(BACKUP_SUFFIX):
        return None

    parent = stem[:-len(BACKUP_SUFFIX)]
    return parent or None


def is_backup_branch(name: str) -> bool:
    return backup_parent(name) is not None
