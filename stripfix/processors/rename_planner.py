"""Rename plan construction."""

from collections.abc import Sequence

from stripfix.errors import InvalidPathError
from stripfix.models.named_path import NamedPath, RenameEntry


def replace_prefix(name: str, prefix: str, replacement: str | None = None) -> str:
    """Replace the first occurrence of prefix in name; later occurrences are kept."""
    return name.replace(prefix, replacement or "", 1)


def plan_rename(candidate: NamedPath, prefix: str, replacement: str | None = None) -> RenameEntry:
    """Plan the rename of a single candidate.

    A new name that cannot be used (empty, which happens when the name is the
    prefix alone and there is no replacement, or containing a separator) gives
    an entry without a target whose ``problem`` holds the reason.
    """
    new_name = replace_prefix(candidate.name, prefix, replacement)
    try:
        new = candidate.with_name(new_name)
    except InvalidPathError as e:
        return RenameEntry(old=candidate, new=None, problem=e.reason)
    return RenameEntry(old=candidate, new=new)


def plan_renames(
    candidates: Sequence[NamedPath],
    prefix: str,
    replacement: str | None = None,
) -> list[RenameEntry]:
    """Map every candidate to its renamed counterpart in the same directory.

    Args:
        candidates: Candidates whose names all start with prefix.
        prefix: Text to remove or replace.
        replacement: Text put in place of the prefix. None deletes the prefix.

    Returns:
        One RenameEntry per candidate, in candidate order.
    """
    return [plan_rename(candidate, prefix, replacement) for candidate in candidates]
