# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Run-time tunables for reconstruction runs.

Values come from environment variables so that batch jobs can change the
behaviour without code changes; the CLI flags override them per invocation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


def _load_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    if not value:
        return default
    return Path(value).expanduser()


def _default_audit_dir() -> Path:
    return Path.home() / ".shamir_recover_audit"


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds the knobs that change how a share set is processed."""

    decode_workers: int = 1
    verify_unused: bool = False
    strict_count: bool = False
    audit_dir: Path = field(default_factory=_default_audit_dir)


def load_policy() -> RecoveryPolicy:
    """Load the policy considering environment overrides."""

    return RecoveryPolicy(
        decode_workers=max(1, _load_int("SHAMIR_RECOVER_DECODE_WORKERS", 1)),
        verify_unused=_load_bool("SHAMIR_RECOVER_VERIFY_UNUSED", False),
        strict_count=_load_bool("SHAMIR_RECOVER_STRICT_COUNT", False),
        audit_dir=_load_path("SHAMIR_RECOVER_AUDIT_DIR", _default_audit_dir()),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
