"""
Minimal field extraction for the flat status JSON document.

This is not a JSON parser. It scans for one quoted key and delimits the
value that follows it, which is enough for the fixed, flat shape the
updater writes. Escaped quotes inside string values are not unescaped and
end the value early.

Values are bounded in UTF-8 bytes, like the fixed-size slots the updater
protocol was designed around; a multi-byte character that would straddle
the limit is dropped whole.
"""

from __future__ import annotations

import json
import re
from typing import Optional

_WHITESPACE = " \t\r\n"
_TOKEN_END = ",}" + _WHITESPACE
_INT_PREFIX_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def extract_field(json_text: str, field_name: str, max_len: int) -> Optional[str]:
    """
    Return the raw value of field_name, truncated to max_len - 1 UTF-8 bytes.

    Returns None when the key is absent or its value cannot be delimited
    (no colon after the key, or a string value without a closing quote).
    The first occurrence of the key wins.
    """
    if max_len < 1:
        raise ValueError(f"max_len must be >= 1, got {max_len}")

    key = f'"{field_name}"'
    key_pos = json_text.find(key)
    if key_pos < 0:
        return None

    colon = json_text.find(":", key_pos + len(key))
    if colon < 0:
        return None

    start = colon + 1
    end_of_text = len(json_text)
    while start < end_of_text and json_text[start] in _WHITESPACE:
        start += 1

    if start < end_of_text and json_text[start] == '"':
        start += 1
        end = json_text.find('"', start)
        if end < 0:
            return None
    else:
        end = start
        while end < end_of_text and json_text[end] not in _TOKEN_END:
            end += 1

    value = json_text[start:end].encode("utf-8")[: max_len - 1]
    return value.decode("utf-8", errors="ignore")


def parse_int_prefix(text: str) -> int:
    """Best-effort integer conversion: leading digits only, 0 when there are none."""
    m = _INT_PREFIX_RE.match(text)
    return int(m.group(1)) if m else 0


def format_status_document(progress: int, status: str, step: str) -> str:
    """Render the status file the way the updater writes it."""
    doc = {"progress": progress, "status": status, "step": step}
    return json.dumps(doc, indent=4, ensure_ascii=False) + "\n"
