# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Read share documents from disk.

A share document is a mapping with a ``keys`` entry holding ``n`` and ``k``;
every other top-level key is a share index::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": 2, "value": "111"}
    }

``.yaml``/``.yml`` files are read with PyYAML, anything else as JSON. Quote
share values in YAML: an unquoted ``0111`` is read as an octal integer.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Mapping

import yaml

from .errors import LoadError
from .models import ShareRecord, ShareSet

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"
YAML_SUFFIXES = {".yaml", ".yml"}


def _parse_count(keys: Mapping[str, Any], name: str) -> int:
    raw = keys.get(name)
    if isinstance(raw, bool) or raw is None:
        raise LoadError(f"keys.{name} is missing or not an integer: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise LoadError(f"keys.{name} is not a usable integer: {exc}") from exc
    raise LoadError(f"keys.{name} is not an integer: {raw!r}")


def parse_share_document(document: Any, source: str = "<memory>") -> ShareSet:
    """Build a :class:`ShareSet` from an already decoded document."""
    if not isinstance(document, Mapping):
        raise LoadError(f"{source}: top level must be a mapping")
    keys = document.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise LoadError(f"{source}: missing '{KEYS_FIELD}' section")
    n = _parse_count(keys, "n")
    k = _parse_count(keys, "k")
    if k < 1:
        raise LoadError(f"{source}: keys.k must be at least 1, got {k}")

    records: List[ShareRecord] = []
    for key, entry in document.items():
        if key == KEYS_FIELD:
            continue
        if not isinstance(entry, Mapping):
            raise LoadError(f"{source}: share {key!r} must be a mapping with base and value")
        value = entry.get("value")
        # YAML turns bare digit strings into ints.
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                value = str(value)
            except ValueError as exc:
                raise LoadError(f"{source}: share {key!r} value cannot be rendered: {exc}") from exc
        records.append(ShareRecord(index=key, base=entry.get("base"), value=value))

    _logger.debug("%s: loaded %d share records (n=%d, k=%d)", source, len(records), n, k)
    return ShareSet(n=n, k=k, records=tuple(records), source=source)


def load_share_set(path: os.PathLike[str] | str) -> ShareSet:
    """Read and parse the share document at ``path``."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read {file_path}: {exc}") from exc
    try:
        if file_path.suffix.lower() in YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise LoadError(f"cannot parse {file_path}: {exc}") from exc
    return parse_share_document(document, source=str(file_path))


__all__ = ["parse_share_document", "load_share_set"]
