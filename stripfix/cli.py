"""CLI entrypoint."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click
from click.core import ParameterSource
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from stripfix.errors import NoCandidatesError, StripfixError
from stripfix.models.config import DEFAULT_SOURCE_DIRECTORY, StripConfig
from stripfix.models.named_path import SkippedItem
from stripfix.processors.candidate_resolver import CandidateResolver
from stripfix.processors.prefix_resolver import PrefixResolver
from stripfix.processors.rename_executor import RenameExecutor
from stripfix.processors.rename_planner import plan_renames


console = Console()
err_console = Console(stderr=True)


def _package_version() -> str:
    try:
        return version("stripfix")
    except PackageNotFoundError:
        return "unknown"


def _report_error(message: str) -> None:
    err_console.print(Text.assemble(("Error:", "bold red"), " ", message), soft_wrap=True)


def _report_skipped(items: list[SkippedItem]) -> None:
    for item in items:
        err_console.print(Text(str(item)), soft_wrap=True)


@click.command("stripfix", context_settings=dict(show_default=True))
@click.argument("files", type=click.Path(path_type=Path), nargs=-1)
@click.option("-p", "--prefix", type=str, default=None, help="Manually set the prefix to strip.")
@click.option(
    "-s",
    "--source-directory",
    type=click.Path(path_type=Path),
    default=DEFAULT_SOURCE_DIRECTORY,
    help="Use all files in the specified directory.",
)
@click.option(
    "-d",
    "--include-directories",
    is_flag=True,
    default=False,
    help="Include directories to be stripped.",
)
@click.option(
    "-r",
    "--replace",
    "replacement",
    type=str,
    default=None,
    help="Replace the prefix with this text instead of removing it.",
)
@click.option(
    "-y",
    "--skip-confirmation",
    is_flag=True,
    default=False,
    help="Apply renames without asking for confirmation.",
)
@click.option("--dry-run", is_flag=True, default=False, help="Only show the planned renames.")
@click.version_option(version=_package_version(), prog_name="stripfix")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[Path, ...],
    prefix: str | None,
    source_directory: Path,
    include_directories: bool,
    replacement: str | None,
    skip_confirmation: bool,
    dry_run: bool,
) -> None:
    """stripfix - Strip a common prefix from file names.

    Without FILES every file in the source directory is considered. The
    prefix is detected as the longest prefix shared by all names unless
    --prefix is given, in which case only names starting with it are renamed.

    Examples:

        stripfix --source-directory photos

        stripfix --prefix "IMG_" --replace "holiday_" -- IMG_0001.jpg IMG_0002.jpg
    """
    source_given = ctx.get_parameter_source("source_directory") not in (
        ParameterSource.DEFAULT,
        ParameterSource.DEFAULT_MAP,
    )
    if files and source_given:
        raise click.UsageError("Cannot specify both FILES and --source-directory")

    try:
        config = StripConfig(
            files=list(files) or None,
            source_directory=source_directory if source_given else None,
            prefix=prefix,
            replacement=replacement,
            include_directories=include_directories,
            skip_confirmation=skip_confirmation,
            dry_run=dry_run,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    try:
        run(config)
    except StripfixError as e:
        _report_error(str(e))
        raise SystemExit(1) from e


def run(config: StripConfig) -> None:
    """Resolve, plan, preview, confirm and apply the renames for one run.

    Raises:
        StripfixError: On any condition that aborts the run. Nothing has been
            renamed when this is raised.
    """
    resolver = CandidateResolver(include_directories=config.include_directories)
    try:
        resolution = resolver.resolve(config.files, config.directory)
    except NoCandidatesError as e:
        _report_skipped(e.skipped)
        raise
    _report_skipped(resolution.skipped)

    selection = PrefixResolver().resolve(resolution.candidates, config.prefix_mode)
    entries = plan_renames(selection.candidates, selection.prefix, config.replacement)

    executor = RenameExecutor(console=console, err_console=err_console)

    console.print(
        Text.assemble("Prefix: ", (repr(selection.prefix), "bold magenta"), f" ({len(selection)} file(s))")
    )
    executor.preview(entries, selection.prefix, config.replacement)

    if config.dry_run:
        console.print("[yellow]Dry run. No files were renamed.[/yellow]")
        return

    if not config.skip_confirmation and not executor.confirm():
        console.print("[yellow]Aborted. No files were renamed.[/yellow]")
        return

    report = executor.execute(entries)

    style = "bold green" if not report.failures else "bold yellow"
    console.print(f"[{style}]Renamed {len(report.renamed)} of {report.attempted} file(s).[/{style}]")
