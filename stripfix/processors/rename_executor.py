"""Preview, confirmation and application of a rename plan."""

import errno
import os
from collections.abc import Sequence
from dataclasses import dataclass, field

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from stripfix.errors import ConfirmationError
from stripfix.models.named_path import RenameEntry, lossy_text


PREFIX_STYLE = "bold red"
REPLACEMENT_STYLE = "bold green"

CONFIRM_PROMPT = "Proceed with renaming? [y/N]"
ACCEPT_RESPONSES = {"y", "Y"}
DECLINE_RESPONSES = {"n", "N", ""}


@dataclass
class RenameFailure:
    """A planned rename that could not be applied."""

    entry: RenameEntry
    reason: str

    def __str__(self) -> str:
        old = lossy_text(self.entry.old.path)
        if self.entry.new is None:
            return f"Failed to rename {old}: {self.reason}"
        return f"Failed to rename {old} -> {lossy_text(self.entry.new.path)}: {self.reason}"


@dataclass
class ExecutionReport:
    """Outcome of applying a rename plan."""

    renamed: list[RenameEntry] = field(default_factory=list)
    failures: list[RenameFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.renamed) + len(self.failures)


def split_name(name: str, start: int, length: int) -> tuple[str, str, str]:
    """Split name into the part before start, the next length characters, and the rest."""
    return name[:start], name[start : start + length], name[start + length :]


class RenameExecutor:
    """Shows the planned renames, asks for confirmation and applies them."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        """Initialize the executor.

        Args:
            console: Console for the preview and prompts.
            err_console: Console for per-item diagnostics.
        """
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def render_preview(self, entries: Sequence[RenameEntry], prefix: str, replacement: str | None = None) -> Table:
        """Build a table of original and new names with the prefix boundary highlighted."""
        replacement = replacement or ""

        table = Table(show_header=True, header_style="bold")
        table.add_column("Original", style="cyan", overflow="fold")
        table.add_column("New Name", overflow="fold")

        for entry in entries:
            old_name = entry.old.display_name
            # The replacement sits where the prefix started in the original name
            start = old_name.find(prefix)
            found = start >= 0
            if not found:
                start = 0
            length = len(prefix) if found else 0

            head, marked, tail = split_name(old_name, start, length)
            original = Text(head)
            original.append(marked, style=PREFIX_STYLE)
            original.append(tail)

            if entry.new is None:
                renamed = Text(f"({entry.problem})", style="dim red")
            else:
                head, marked, tail = split_name(entry.new.display_name, start, len(replacement) if found else 0)
                renamed = Text(head)
                renamed.append(marked, style=REPLACEMENT_STYLE)
                renamed.append(tail)

            table.add_row(original, renamed)

        return table

    def preview(self, entries: Sequence[RenameEntry], prefix: str, replacement: str | None = None) -> None:
        self.console.print(self.render_preview(entries, prefix, replacement))

    def confirm(self) -> bool:
        """Ask until the answer is recognized.

        Returns:
            True for ``y``/``Y``; False for ``n``/``N`` or an empty answer.

        Raises:
            ConfirmationError: If input could not be read.
        """
        while True:
            try:
                response = click.prompt(CONFIRM_PROMPT, default="", show_default=False, prompt_suffix=" ")
            except click.exceptions.Abort as e:
                raise ConfirmationError() from e

            response = response.strip()
            if response in ACCEPT_RESPONSES:
                return True
            if response in DECLINE_RESPONSES:
                return False

    def execute(self, entries: Sequence[RenameEntry]) -> ExecutionReport:
        """Apply renames in order, reporting each failure and carrying on.

        Renames never overwrite: an existing target is a failure for that entry,
        as is an entry planned without a usable new name.
        Earlier renames are not undone when a later one fails.
        """
        report = ExecutionReport()

        for entry in entries:
            if entry.new is None:
                self._fail(report, RenameFailure(entry=entry, reason=entry.problem or "invalid new name"))
                continue
            try:
                self._rename(entry)
            except OSError as e:
                self._fail(report, RenameFailure(entry=entry, reason=e.strerror or str(e)))
                continue
            report.renamed.append(entry)

        return report

    def _fail(self, report: ExecutionReport, failure: RenameFailure) -> None:
        report.failures.append(failure)
        self.err_console.print(Text(str(failure), style="red"), soft_wrap=True)

    def _rename(self, entry: RenameEntry) -> None:
        if entry.is_noop:
            return
        if os.path.lexists(entry.new.path):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(entry.new.path))
        entry.old.path.rename(entry.new.path)
