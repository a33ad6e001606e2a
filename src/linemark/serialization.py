"""Serialization for classified lines.

Converts ClassifiedLine lists and ProcessedDocument results to/from
JSON-compatible dicts. Useful for:
- Caching classified documents to disk
- Handing the line sequence to an inline tokenizer in another process
- Debugging and inspection

Styles are written by member name. All JSON output is deterministic
(sorted keys).

Example:
    from linemark import process
    from linemark.serialization import to_json, from_json

    lines = process("# Hello\\nWorld")
    restored = from_json(to_json(lines))
    assert [l.style for l in restored] == [l.style for l in lines]

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from types import MappingProxyType
from typing import Any

from linemark.lines import ClassifiedLine, ProcessedDocument
from linemark.styles import LineStyle


def to_dict(line: ClassifiedLine) -> dict[str, Any]:
    """Convert a ClassifiedLine to a JSON-compatible dict.

    Args:
        line: Line to convert.

    Returns:
        Dict with ``text``, ``style``, ``table_rows``, ``literal`` and
        ``lineno`` keys.

    """
    return {
        "text": line.text,
        "style": line.style.name,
        "table_rows": [list(row) for row in line.table_rows],
        "literal": line.literal,
        "lineno": line.lineno,
    }


def from_dict(data: dict[str, Any]) -> ClassifiedLine:
    """Reconstruct a ClassifiedLine from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        ClassifiedLine instance.

    Raises:
        ValueError: If ``text`` or ``style`` is missing or the style is unknown.

    """
    if "text" not in data or "style" not in data:
        msg = "Serialized line needs 'text' and 'style' fields"
        raise ValueError(msg)

    try:
        style = LineStyle[data["style"]]
    except KeyError:
        msg = f"Unknown line style: {data['style']!r}"
        raise ValueError(msg) from None

    return ClassifiedLine(
        text=data["text"],
        style=style,
        table_rows=[list(row) for row in data.get("table_rows", [])],
        literal=bool(data.get("literal", False)),
        lineno=data.get("lineno"),
    )


def document_to_dict(document: ProcessedDocument) -> dict[str, Any]:
    """Convert a ProcessedDocument to a JSON-compatible dict."""
    return {
        "lines": [to_dict(line) for line in document.lines],
        "front_matter": dict(document.front_matter),
        "unclosed_token": document.unclosed_token,
        "unclosed_block": document.unclosed_block,
    }


def document_from_dict(data: dict[str, Any]) -> ProcessedDocument:
    """Reconstruct a ProcessedDocument from a dict."""
    return ProcessedDocument(
        lines=[from_dict(line) for line in data.get("lines", [])],
        front_matter=MappingProxyType(dict(data.get("front_matter", {}))),
        unclosed_token=data.get("unclosed_token"),
        unclosed_block=data.get("unclosed_block"),
    )


def to_json(
    value: list[ClassifiedLine] | ProcessedDocument, *, indent: int | None = None
) -> str:
    """Serialize classified lines or a whole document to a JSON string.

    Args:
        value: Line list (JSON array) or ProcessedDocument (JSON object).
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    if isinstance(value, ProcessedDocument):
        payload: Any = document_to_dict(value)
    else:
        payload = [to_dict(line) for line in value]
    return json.dumps(payload, sort_keys=True, indent=indent)


def from_json(data: str) -> list[ClassifiedLine] | ProcessedDocument:
    """Deserialize a JSON string produced by to_json.

    Returns:
        A line list for a JSON array, a ProcessedDocument for an object.

    Raises:
        ValueError: If the JSON is neither an array nor an object.

    """
    raw = json.loads(data)
    if isinstance(raw, list):
        return [from_dict(item) for item in raw]
    if isinstance(raw, dict):
        return document_from_dict(raw)
    msg = f"Expected a JSON array or object, got {type(raw).__name__}"
    raise ValueError(msg)
