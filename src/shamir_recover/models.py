# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Value types passed between the loader, selector and interpolator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple, Union

# A share base as it arrives from the document: 16 or "16".
Base = Union[int, str]

Stage = Literal["record", "decode", "policy"]


@dataclass(frozen=True)
class ShareRecord:
    """Raw share as read from a share document; validated by the selector."""

    index: Union[int, str]
    base: Optional[Base]
    value: Optional[str]


@dataclass(frozen=True)
class ValidRecord:
    """A share whose index and base passed validation; value not yet decoded."""

    index: int
    base: int
    value: str


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem recorded while processing one share."""

    index: Union[int, str, None]
    stage: Stage
    message: str

    def __str__(self) -> str:
        if self.index is None:
            return f"[{self.stage}] {self.message}"
        return f"[{self.stage}] share {self.index}: {self.message}"


@dataclass(frozen=True)
class ShareSet:
    n: int
    k: int
    records: Tuple[ShareRecord, ...]
    source: str = "<memory>"


@dataclass
class Selection:
    points: List[Point]
    diagnostics: List[Diagnostic] = field(default_factory=list)
    # Valid records never consulted because k points were already collected.
    unused: List[ValidRecord] = field(default_factory=list)


@dataclass
class Reconstruction:
    secret: int
    points: List[Point]
    diagnostics: List[Diagnostic] = field(default_factory=list)
    unused: List[int] = field(default_factory=list)

    @property
    def indices(self) -> List[int]:
        return [point.x for point in self.points]


__all__ = [
    "Base",
    "ShareRecord",
    "ValidRecord",
    "Point",
    "Diagnostic",
    "ShareSet",
    "Selection",
    "Reconstruction",
]
