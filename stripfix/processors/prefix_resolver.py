"""Prefix discovery and validation."""

from collections.abc import Sequence

from stripfix.errors import NoCandidatesError, PrefixNotFoundError
from stripfix.models.named_path import NamedPath
from stripfix.models.prefix import AutoDetectPrefix, PrefixMode, PrefixResolution, SuppliedPrefix


def longest_common_prefix(names: Sequence[str]) -> str:
    """Return the longest string that every name starts with.

    Comparison is exact: no case folding and no normalization. An empty
    sequence, or any empty name, yields an empty prefix.
    """
    if not names:
        return ""

    first = names[0]
    max_len = min(len(name) for name in names)

    matched = 0
    while matched < max_len:
        char = first[matched]
        if any(name[matched] != char for name in names):
            break
        matched += 1

    return first[:matched]


def filter_by_prefix(candidates: Sequence[NamedPath], prefix: str) -> list[NamedPath]:
    """Keep only candidates whose name starts with prefix, in their original order."""
    return [candidate for candidate in candidates if candidate.name.startswith(prefix)]


class PrefixResolver:
    """Decides which prefix a run strips and which candidates it touches."""

    def resolve(self, candidates: Sequence[NamedPath], mode: PrefixMode) -> PrefixResolution:
        """Resolve the prefix for the given candidates.

        Args:
            candidates: Candidates from resolution, in run order.
            mode: A supplied prefix to validate against, or auto-detection.

        Returns:
            PrefixResolution with the prefix and the candidates that carry it.

        Raises:
            NoCandidatesError: If no candidate starts with a supplied prefix.
            PrefixNotFoundError: If auto-detection finds no common prefix.
        """
        if isinstance(mode, SuppliedPrefix):
            return self._validate(candidates, mode.value)
        if isinstance(mode, AutoDetectPrefix):
            return self._detect(candidates)
        raise TypeError(f"Unsupported prefix mode: {mode!r}")

    def _validate(self, candidates: Sequence[NamedPath], prefix: str) -> PrefixResolution:
        matching = filter_by_prefix(candidates, prefix)
        if not matching:
            raise NoCandidatesError()
        return PrefixResolution(prefix=prefix, candidates=matching)

    def _detect(self, candidates: Sequence[NamedPath]) -> PrefixResolution:
        prefix = longest_common_prefix([candidate.name for candidate in candidates])
        if not prefix:
            raise PrefixNotFoundError()
        return PrefixResolution(prefix=prefix, candidates=list(candidates))
