"""Path and rename plan data models."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from stripfix.errors import InvalidPathError


def lossy_text(value: str | Path) -> str:
    """Render a name or path as printable text, replacing undecodable bytes."""
    return os.fsencode(value).decode("utf-8", errors="replace")


@dataclass(frozen=True)
class NamedPath:
    """A filesystem path together with its cached final component.

    Names keep undecodable bytes as surrogate escapes so renames preserve them;
    use ``display_name`` for output.

    Raises:
        InvalidPathError: If the path ends in nothing usable as a file name
            (for example ``/``, ``.`` or ``..``).
    """

    path: Path
    name: str = field(init=False)

    def __post_init__(self) -> None:
        name = self.path.name
        if not name or name == "..":
            raise InvalidPathError(self.path)
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return f"NamedPath('{self.display_name}', path='{lossy_text(self.path)}')"

    @classmethod
    def from_path(cls, path: Path | str) -> "NamedPath":
        return cls(Path(path))

    @property
    def display_name(self) -> str:
        """Name as printable text, with undecodable bytes replaced."""
        return lossy_text(self.name)

    def with_name(self, name: str) -> "NamedPath":
        """Return a NamedPath in the same directory with a different final component."""
        try:
            path = self.path.with_name(name)
        except ValueError as e:
            # Empty names and names containing a separator
            raise InvalidPathError(self.path, f"can't be renamed to '{lossy_text(name)}'") from e
        return NamedPath(path)


@dataclass(frozen=True)
class RenameEntry:
    """A planned rename from one path to another in the same directory.

    When the new name is unusable ``new`` is None and ``problem`` says why; the
    entry then fails on its own at execution time.
    """

    old: NamedPath
    new: NamedPath | None
    problem: str | None = None

    def __str__(self) -> str:
        if self.new is None:
            return f"RenameEntry('{self.old.display_name}', problem='{self.problem}')"
        return f"RenameEntry('{self.old.display_name}' -> '{self.new.display_name}')"

    @property
    def is_valid(self) -> bool:
        return self.new is not None

    @property
    def is_noop(self) -> bool:
        return self.new is not None and self.old.path == self.new.path


@dataclass(frozen=True)
class SkippedItem:
    """A path left out of the run and the reason it was dropped."""

    path: Path
    reason: str

    def __str__(self) -> str:
        return f"Skipping {lossy_text(self.path)}: {self.reason}"
