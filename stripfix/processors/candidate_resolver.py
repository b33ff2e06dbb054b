"""Resolution of the files a run may rename."""

import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from stripfix.errors import InvalidPathError, NoCandidatesError, SourceDirectoryError
from stripfix.models.named_path import NamedPath, SkippedItem


@dataclass
class ResolutionResult:
    """Candidates that survived resolution and the items dropped along the way."""

    candidates: list[NamedPath] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)

    def skip(self, path: Path, reason: str) -> None:
        self.skipped.append(SkippedItem(path=path, reason=reason))


class CandidateResolver:
    """Turns an explicit file list or a directory listing into candidates."""

    def __init__(self, include_directories: bool = False) -> None:
        """Initialize the resolver.

        Args:
            include_directories: Keep directory entries found while listing a
                directory. Explicit files are never filtered by type.
        """
        self.include_directories = include_directories

    def resolve(self, explicit_files: Sequence[Path] | None, source_directory: Path) -> ResolutionResult:
        """Resolve candidates from explicit files, or from the source directory.

        Args:
            explicit_files: Files named on the command line. When given, the
                source directory is not listed.
            source_directory: Directory whose immediate entries are candidates.

        Returns:
            ResolutionResult with at least one candidate.

        Raises:
            SourceDirectoryError: If the source directory cannot be opened.
            NoCandidatesError: If every item was skipped.
        """
        if explicit_files:
            result = self._resolve_files(explicit_files)
        else:
            result = self._resolve_directory(source_directory)

        if not result.candidates:
            raise NoCandidatesError(skipped=result.skipped)

        return result

    def _resolve_files(self, paths: Sequence[Path]) -> ResolutionResult:
        result = ResolutionResult()
        seen: set[Path] = set()

        for path in paths:
            try:
                os.stat(path)
            except FileNotFoundError:
                result.skip(path, "file does not exist")
                continue
            except OSError as e:
                result.skip(path, f"couldn't check existence: {e.strerror or e}")
                continue

            key = path.absolute()
            if key in seen:
                continue

            try:
                candidate = NamedPath.from_path(path)
            except InvalidPathError:
                result.skip(path, "path has no file name")
                continue

            seen.add(key)
            result.candidates.append(candidate)

        return result

    def _resolve_directory(self, directory: Path) -> ResolutionResult:
        result = ResolutionResult()

        try:
            scanner = os.scandir(directory)
        except OSError as e:
            raise SourceDirectoryError(directory, e) from e

        with scanner:
            entries = sorted(self._iter_entries(scanner, directory, result), key=lambda entry: entry.name)

        for entry in entries:
            path = directory / entry.name
            if not self.include_directories:
                try:
                    is_directory = entry.is_dir(follow_symlinks=False)
                except OSError as e:
                    result.skip(path, f"couldn't get file type: {e.strerror or e}")
                    continue
                if is_directory:
                    continue

            result.candidates.append(NamedPath.from_path(path))

        return result

    def _iter_entries(
        self, scanner: Iterator[os.DirEntry], directory: Path, result: ResolutionResult
    ) -> Iterator[os.DirEntry]:
        """Yield directory entries, recording a read error as a skipped item.

        A failed read leaves the listing unusable, so the remaining entries are
        not attempted.
        """
        while True:
            try:
                entry = next(scanner)
            except StopIteration:
                return
            except OSError as e:
                result.skip(directory, f"failed to read directory entry: {e.strerror or e}")
                return
            yield entry
