"""
Issue and pull request references.

    #123             -> <issue_base_url>123, or the configured repo's issues
    owner/repo#123   -> https://github.com/owner/repo/issues/123 (always)
"""

from __future__ import annotations

import html
import re

from .code_fences import map_outside_tags, map_prose

GITHUB_URL = "https://github.com/"

_ISSUE_RE = re.compile(r"(^|\s)#(\d+)\b")
# Owner and repo stay within GitHub length limits; the lookbehind keeps URL
# paths such as "example.com/docs/page#12" out
_REPO_ISSUE_RE = re.compile(r"(?<![\w./:-])([\w.-]{1,100}/[\w.-]{1,100})#(\d+)\b")


def issue_base(github_repo: str | None = None, issue_base_url: str | None = None) -> str:
    if issue_base_url:
        return issue_base_url
    if github_repo:
        return f"{GITHUB_URL}{github_repo}/issues/"
    return ""


def process_issue_links(
    markdown: str, github_repo: str | None = None, issue_base_url: str | None = None
) -> str:
    base = html.escape(issue_base(github_repo, issue_base_url), quote=True)

    def rewrite(text: str) -> str:
        if base:
            text = _ISSUE_RE.sub(
                lambda m: f'{m.group(1)}<a href="{base}{m.group(2)}">#{m.group(2)}</a>', text
            )
        return _REPO_ISSUE_RE.sub(
            lambda m: (
                f'<a href="{GITHUB_URL}{m.group(1)}/issues/{m.group(2)}">'
                f"{m.group(1)}#{m.group(2)}</a>"
            ),
            text,
        )

    return map_prose(markdown, lambda text: map_outside_tags(text, rewrite))


def issue_links_default(text: str, context: dict) -> str:
    options = context["options"]
    return process_issue_links(text, options.github_repo, options.issue_base_url)
