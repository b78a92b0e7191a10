"""
Front matter parser for post and project documents.

Documents may start with a simplified YAML block:

    ---
    title: "Hello World"
    tags: [python, django]
    summary: First line
      continued on the next one
    ---
    Body text

Only the subset above is understood: ``key: value`` pairs, quoted scalars,
flat ``[a, b]`` lists, comma separated ``tags`` and indented continuation
lines. Anything else is skipped rather than reported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Union

_FRONT_MATTER_RE = re.compile(r"\A---\n(.*?)\n---(?:\n|\Z)", re.DOTALL)
_LIST_ITEM_RE = re.compile(r"^[-*]\s*(.+)$")


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass(frozen=True)
class Sequence:
    items: List[str] = field(default_factory=list)


FrontMatterValue = Union[Scalar, Sequence]


@dataclass
class FrontMatter:
    """Parsed metadata plus the remaining markdown body."""

    data: Dict[str, FrontMatterValue] = field(default_factory=dict)
    body: str = ""

    def get(self, key, default=None):
        value = self.data.get(key)
        if value is None:
            return default
        return _unwrap(value)

    def as_dict(self) -> Dict[str, Union[str, List[str]]]:
        return {key: _unwrap(value) for key, value in self.data.items()}


def _unwrap(value: FrontMatterValue) -> Union[str, List[str]]:
    if isinstance(value, Sequence):
        return list(value.items)
    return value.value


def _split_items(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_value(key: str, raw: str) -> FrontMatterValue:
    value = _strip_quotes(raw)
    if value.startswith("[") and value.endswith("]"):
        return Sequence(_split_items(value[1:-1]))
    if key.lower() == "tags" and "," in value:
        return Sequence(_split_items(value))
    return Scalar(value)


def _continue(current: FrontMatterValue, line: str) -> FrontMatterValue:
    item = _LIST_ITEM_RE.match(line)
    if isinstance(current, Sequence):
        if item:
            return Sequence(current.items + [item.group(1)])
        # free text under a list folds the list back into a scalar
        return Scalar(",".join(current.items) + "\n" + line)
    if item and not current.value:
        # "key:" followed by an indented "- item" block list
        return Sequence([item.group(1)])
    return Scalar(f"{current.value}\n{line}")


def parse_front_matter(text: str) -> FrontMatter:
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return FrontMatter(data={}, body=text)

    data: Dict[str, FrontMatterValue] = {}
    current_key = ""
    for raw in match.group(1).split("\n"):
        if not raw.strip():
            continue

        if raw[0].isspace():
            if current_key:
                data[current_key] = _continue(data[current_key], raw.strip())
            continue

        key, sep, value = raw.partition(":")
        if not sep:
            continue
        key = key.strip()
        data[key] = _parse_value(key, value.strip())
        current_key = key

    return FrontMatter(data=data, body=text[match.end():])
