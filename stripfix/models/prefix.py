"""Prefix selection models."""

from dataclasses import dataclass, field
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from stripfix.models.named_path import NamedPath


class SuppliedPrefix(BaseModel):
    """A prefix given by the user; candidates are filtered against it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["supplied"] = "supplied"
    value: str = Field(description="Prefix used verbatim, case-sensitive")


class AutoDetectPrefix(BaseModel):
    """No prefix given; the longest common prefix of all names is used."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["auto"] = "auto"


PrefixMode = Annotated[SuppliedPrefix | AutoDetectPrefix, Field(discriminator="kind")]


@dataclass(frozen=True)
class PrefixResolution:
    """The prefix to strip and the candidates it applies to."""

    prefix: str
    candidates: list[NamedPath] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.candidates)
