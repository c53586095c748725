from __future__ import annotations

from typing import Any, Dict, Mapping

_APOSTROPHES = str.maketrans({
    "’": "'",
    "‘": "'",
    "ʼ": "'",
    "´": "'",
    "`": "'",
})


def normalize_header(header: str) -> str:
    """Fold apostrophe variants and stray whitespace in a sheet header."""
    return " ".join(str(header).translate(_APOSTROPHES).split())


def normalize_fields(raw: Mapping[str, Any]) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    for key, value in raw.items():
        name = normalize_header(key)
        # first non-empty value wins when two variants collapse onto one header
        if name in fields and fields[name] not in (None, ""):
            continue
        fields[name] = value
    return fields
