# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Offline audit trail of reconstruction runs.

Every entry is signed with a local Ed25519 key and chained to the previous
entry through a SHA3-512 hash. Entries describe which shares were used and
how a run ended; recovered secrets are never written.
"""

from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .policy import policy

KEY_FILENAME = "signing_key.pem"
CHAIN_STATE_FILENAME = "chain.state"
GENESIS = "GENESIS"


def _resolve_dir(directory: os.PathLike[str] | str | None) -> Path:
    path = Path(directory).expanduser() if directory is not None else policy.audit_dir
    path.mkdir(parents=True, exist_ok=True)
    return path


def _load_private_key(directory: Path) -> Ed25519PrivateKey:
    key_path = directory / KEY_FILENAME
    if key_path.exists():
        return serialization.load_pem_private_key(key_path.read_bytes(), password=None)
    private_key = Ed25519PrivateKey.generate()
    key_path.write_bytes(
        private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return private_key


def _load_prev_hash(directory: Path) -> str:
    try:
        return (directory / CHAIN_STATE_FILENAME).read_text().strip()
    except FileNotFoundError:
        return GENESIS


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def record_event(
    event: str,
    *,
    details: Optional[Dict[str, Any]] = None,
    directory: os.PathLike[str] | str | None = None,
) -> Path:
    """Append a signed entry for ``event`` and return the file it was written to."""
    audit_dir = _resolve_dir(directory)
    timestamp = int(time.time())
    payload = {
        "event": event,
        "details": details or {},
        "timestamp": timestamp,
        "prev_hash": _load_prev_hash(audit_dir),
    }
    message = _canonical(payload)
    signature = _load_private_key(audit_dir).sign(message)
    chain_hash = hashlib.sha3_512(message + signature).hexdigest()
    entry = {
        "payload": payload,
        "signature": signature.hex(),
        "chain_hash": chain_hash,
    }
    file_path = audit_dir / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
    file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
    (audit_dir / CHAIN_STATE_FILENAME).write_text(chain_hash)
    return file_path


def verify_log(path: os.PathLike[str] | str) -> bool:
    """Check the signature and chain hash of one audit entry."""
    entry_path = Path(path)
    data = json.loads(entry_path.read_text())
    message = _canonical(data["payload"])
    signature = bytes.fromhex(data.get("signature") or "")
    public_key = _load_private_key(entry_path.parent).public_key()
    try:
        public_key.verify(signature, message)
    except InvalidSignature:
        return False
    return hashlib.sha3_512(message + signature).hexdigest() == data.get("chain_hash")


__all__ = ["record_event", "verify_log"]
