from __future__ import annotations

import json
from typing import Any

import orjson


def load_json_text(text: str) -> dict[str, Any]:
    data = orjson.loads(text)
    return data if isinstance(data, dict) else {}


def dump_json_bytes(payload: Any) -> bytes:
    try:
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2)
    except TypeError:
        return json.dumps(payload, ensure_ascii=True, indent=2).encode("utf-8")
