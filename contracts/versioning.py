"""Version metadata for payloads sent to the backend."""

from __future__ import annotations

from typing import Any, Dict

SCHEMA_VERSION = "1.0.0"
APP_VERSION = "0.1.0"


def make_envelope(kind: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Tag a payload with its kind and the schema/app versions."""
    return {
        "kind": kind,
        "schema_version": SCHEMA_VERSION,
        "app_version": APP_VERSION,
        "payload": payload,
    }


def is_compatible(envelope: Dict[str, Any]) -> bool:
    """True when the envelope shares our schema major version."""
    version = str(envelope.get("schema_version", ""))
    return version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
