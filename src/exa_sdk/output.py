from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class EnvelopeMeta:
    duration_ms: int
    endpoint: str | None = None
    base_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration_ms": self.duration_ms,
            "endpoint": self.endpoint,
            "base_url": self.base_url,
        }


def make_envelope(
    *,
    ok: bool,
    command: str,
    version: str,
    data: Any,
    warnings: list[str],
    error: dict[str, Any] | None,
    meta: EnvelopeMeta,
) -> dict[str, Any]:
    return {
        "ok": ok,
        "command": command,
        "version": version,
        "data": data,
        "warnings": warnings,
        "error": error,
        "meta": meta.to_dict(),
    }


def print_json(payload: dict[str, Any], *, pretty: bool) -> None:
    if pretty:
        json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    else:
        json.dump(payload, sys.stdout, ensure_ascii=False, separators=(",", ":"))
    sys.stdout.write("\n")
