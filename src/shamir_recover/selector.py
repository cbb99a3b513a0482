# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Turn raw share records into exactly k interpolation points.

Records are validated, ordered by index and decoded one by one. A record
that fails validation or decoding is skipped with a diagnostic and the walk
continues past the first k records until k points are collected.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .decoder import decode
from .errors import DecodeError, DuplicateIndex, InsufficientShares, RecordError, SelectionError, describe_int
from .models import Diagnostic, Point, Selection, ShareRecord, ValidRecord
from .policy import RecoveryPolicy
from .policy import policy as default_policy

_logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36


def _parse_decimal(raw: object, what: str) -> int:
    if isinstance(raw, bool):
        raise RecordError(f"{what} must be a number, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if text.isascii() and text.isdigit():
            try:
                return int(text)
            except ValueError as exc:
                raise RecordError(f"{what} is not a usable integer: {exc}") from exc
    raise RecordError(f"{what} is not a decimal integer: {raw!r}")


def parse_index(raw: Union[int, str]) -> int:
    """Return the share index as a positive integer or raise :class:`RecordError`."""
    index = _parse_decimal(raw, "index")
    if index < 1:
        raise RecordError(f"index must be positive, got {describe_int(index)}")
    return index


def resolve_base(raw: object) -> int:
    """Resolve an integer-or-numeral base into an ``int`` within 2..36."""
    if raw is None:
        raise RecordError("base is missing")
    base = _parse_decimal(raw, "base")
    if not MIN_BASE <= base <= MAX_BASE:
        raise RecordError(f"base must be within {MIN_BASE}..{MAX_BASE}, got {describe_int(base)}")
    return base


def validate_record(record: ShareRecord) -> ValidRecord:
    index = parse_index(record.index)
    base = resolve_base(record.base)
    if not isinstance(record.value, str):
        raise RecordError(f"value must be a digit string, got {record.value!r}")
    return ValidRecord(index=index, base=base, value=record.value)


def _validate_all(records: Iterable[ShareRecord], diagnostics: List[Diagnostic]) -> List[ValidRecord]:
    valid: List[ValidRecord] = []
    for record in records:
        try:
            valid.append(validate_record(record))
        except RecordError as exc:
            diagnostic = Diagnostic(record.index, "record", str(exc))
            _logger.warning("skipping share: %s", diagnostic)
            diagnostics.append(diagnostic)
    return valid


def _reject_duplicates(ordered: Sequence[ValidRecord]) -> None:
    for previous, current in zip(ordered, ordered[1:]):
        if previous.index == current.index:
            raise DuplicateIndex(current.index)


DecodeOutcome = Union[int, DecodeError]


def _try_decode(record: ValidRecord) -> DecodeOutcome:
    try:
        return decode(record.value, record.base)
    except DecodeError as exc:
        return exc


def _decode_in_order(
    ordered: Sequence[ValidRecord], workers: int
) -> Iterator[Tuple[ValidRecord, DecodeOutcome]]:
    if workers <= 1:
        for record in ordered:
            yield record, _try_decode(record)
        return
    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = list(pool.map(_try_decode, ordered))
    yield from zip(ordered, outcomes)


def select(
    records: Iterable[ShareRecord],
    k: int,
    *,
    policy: Optional[RecoveryPolicy] = None,
) -> Selection:
    """Pick the first ``k`` decodable shares in ascending index order."""

    policy = policy or default_policy
    if k < 1:
        raise SelectionError(f"threshold k must be at least 1, got {k}")

    diagnostics: List[Diagnostic] = []
    ordered = sorted(_validate_all(records, diagnostics), key=lambda record: record.index)
    _reject_duplicates(ordered)

    points: List[Point] = []
    for position, (record, outcome) in enumerate(_decode_in_order(ordered, policy.decode_workers)):
        if isinstance(outcome, DecodeError):
            diagnostic = Diagnostic(record.index, "decode", str(outcome))
            _logger.warning("skipping share: %s", diagnostic)
            diagnostics.append(diagnostic)
            continue
        points.append(Point(x=record.index, y=outcome))
        if len(points) == k:
            unused = list(ordered[position + 1 :])
            break
    else:
        raise InsufficientShares(needed=k, got=len(points))

    _logger.debug("selected shares %s", [point.x for point in points])
    return Selection(points=points, diagnostics=diagnostics, unused=unused)


__all__ = [
    "MIN_BASE",
    "MAX_BASE",
    "parse_index",
    "resolve_base",
    "validate_record",
    "select",
]
