"""
keystore_core.utils
-------------------
Timestamp and canonical JSON helpers used when a parameter set is
serialized for the provisioning subsystem.
"""

from __future__ import annotations
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def iso_ts(dt: Optional[datetime]) -> Optional[str]:
    # Naive datetimes are taken to be UTC; millisecond precision
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def canonical_json(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
