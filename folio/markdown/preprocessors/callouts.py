# folio/markdown/preprocessors/callouts.py
"""
Preprocessor that turns callout markers into admonition blocks.

Supported forms (type is case-insensitive):

    [!note] Optional title
    Content runs until a blank line or the next marker.

    > [!warning] Careful
    > Quoted callouts run while lines keep their ">" prefix.

Output:

    <div role="note" class="callout callout-warning">
      <div class="callout-title">Careful</div>
      <div class="callout-content">Quoted callouts run ...</div>
    </div>

Supported types: note, tip, warning, danger, quote

The scanner walks the document line by line, so adversarial input costs
linear time instead of regex backtracking.
"""

import re

from .code_fences import map_prose

CALLOUT_TYPES = ("note", "tip", "warning", "danger", "quote")

_MARKER_RE = re.compile(
    r"^(?P<quote>[ \t]*>[ \t]?)?[ \t]*\[!(?P<type>%s)\][ \t]*(?P<title>.*)$"
    % "|".join(CALLOUT_TYPES),
    re.IGNORECASE,
)
_QUOTE_PREFIX_RE = re.compile(r"^[ \t]*>[ \t]?")


def render_callout(callout_type: str, title: str, content: str) -> str:
    kind = callout_type.lower()
    header = title.strip() or kind.capitalize()
    return (
        f'<div role="note" class="callout callout-{kind}">'
        f'<div class="callout-title">{header}</div>'
        f'<div class="callout-content">{content.strip()}</div>'
        f"</div>"
    )


def _process_prose(text: str) -> str:
    lines = text.split("\n")
    out = []
    i = 0
    while i < len(lines):
        marker = _MARKER_RE.match(lines[i])
        if not marker:
            out.append(lines[i])
            i += 1
            continue

        quoted = marker.group("quote") is not None
        body = []
        i += 1
        while i < len(lines):
            line = lines[i]
            if not line.strip() or _MARKER_RE.match(line):
                break
            if quoted:
                prefix = _QUOTE_PREFIX_RE.match(line)
                if not prefix:
                    break
                line = line[prefix.end():]
            body.append(line)
            i += 1

        out.append(render_callout(marker.group("type"), marker.group("title"), "\n".join(body)))

    return "\n".join(out)


def process_callouts(markdown: str) -> str:
    return map_prose(markdown, _process_prose)


def callouts_default(text: str, context: dict) -> str:
    """
    Default configuration for callouts.

    Register this in PREPROCESSORS.
    """
    return process_callouts(text)
