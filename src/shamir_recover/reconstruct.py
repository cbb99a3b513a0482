# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""End-to-end reconstruction: records -> selection -> interpolation -> secret.

Each call works only on its own arguments, so separate share sets can be
reconstructed concurrently or retried without affecting each other.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .decoder import decode
from .errors import DecodeError, LoadError, ShamirRecoverError, describe_int
from .interpolation import interpolate_at_zero, lagrange_at
from .loader import load_share_set
from .models import Diagnostic, Point, Reconstruction, ShareRecord, ValidRecord
from .policy import RecoveryPolicy
from .policy import policy as default_policy
from .selector import select

_logger = logging.getLogger(__name__)


@dataclass
class RunOutcome:
    """Result of one isolated run over a share file."""

    source: str
    result: Optional[Reconstruction] = None
    error: Optional[ShamirRecoverError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _check_declared_count(
    n: Optional[int], records: Sequence[ShareRecord], policy: RecoveryPolicy
) -> List[Diagnostic]:
    if n is None or n == len(records):
        return []
    message = f"declared n={describe_int(n)} but {len(records)} share records are present"
    if policy.strict_count:
        raise LoadError(message)
    _logger.warning(message)
    return [Diagnostic(None, "policy", message)]


def _verify_unused(points: Sequence[Point], unused: Sequence[ValidRecord]) -> List[Diagnostic]:
    diagnostics: List[Diagnostic] = []
    for record in unused:
        try:
            y = decode(record.value, record.base)
        except DecodeError as exc:
            message = f"unused share does not decode: {exc}"
        else:
            if lagrange_at(points, record.index) == y:
                continue
            message = "unused share does not lie on the reconstructed polynomial"
        _logger.warning("share %d: %s", record.index, message)
        diagnostics.append(Diagnostic(record.index, "policy", message))
    return diagnostics


def reconstruct(
    records: Iterable[ShareRecord],
    k: int,
    *,
    n: Optional[int] = None,
    policy: Optional[RecoveryPolicy] = None,
) -> Reconstruction:
    """Recover the secret from ``records`` using threshold ``k``.

    ``n`` is the share count declared by the document, if any. A mismatch is
    reported as a diagnostic, or raised as :class:`LoadError` when the policy
    asks for strict counting.
    """
    policy = policy or default_policy
    records = tuple(records)
    diagnostics = _check_declared_count(n, records, policy)

    selection = select(records, k, policy=policy)
    diagnostics.extend(selection.diagnostics)
    secret = interpolate_at_zero(selection.points)

    if selection.unused:
        _logger.info(
            "%d valid share(s) beyond the threshold were not used: %s",
            len(selection.unused),
            [record.index for record in selection.unused],
        )
        if policy.verify_unused:
            diagnostics.extend(_verify_unused(selection.points, selection.unused))

    return Reconstruction(
        secret=secret,
        points=selection.points,
        diagnostics=diagnostics,
        unused=[record.index for record in selection.unused],
    )


def reconstruct_file(
    path: os.PathLike[str] | str, *, policy: Optional[RecoveryPolicy] = None
) -> Reconstruction:
    share_set = load_share_set(path)
    return reconstruct(share_set.records, share_set.k, n=share_set.n, policy=policy)


def reconstruct_many(
    paths: Iterable[os.PathLike[str] | str], *, policy: Optional[RecoveryPolicy] = None
) -> List[RunOutcome]:
    """Reconstruct every file independently; a failed run does not stop the rest."""
    outcomes: List[RunOutcome] = []
    for path in paths:
        source = str(path)
        try:
            result = reconstruct_file(path, policy=policy)
        except ShamirRecoverError as exc:
            _logger.error("%s: %s", source, exc)
            outcomes.append(RunOutcome(source=source, error=exc))
        else:
            outcomes.append(RunOutcome(source=source, result=result))
    return outcomes


__all__ = ["RunOutcome", "reconstruct", "reconstruct_file", "reconstruct_many"]
