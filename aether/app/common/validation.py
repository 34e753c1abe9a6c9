from __future__ import annotations

from typing import Iterable, Mapping

from aether.app.common.errors import abort_json


def require_fields(data: Mapping[str, str], fields: Iterable[str]) -> None:
    missing = [f for f in fields if not (data.get(f) or "").strip()]
    if missing:
        abort_json(400, "validation_error", f"Missing required fields: {', '.join(missing)}", {"missing": missing})


def get_int(data: Mapping[str, str], field: str) -> int:
    raw = (data.get(field) or "").strip()
    try:
        return int(raw)
    except ValueError:
        abort_json(400, "validation_error", f"{field} must be an integer", {"field": field, "value": raw})
