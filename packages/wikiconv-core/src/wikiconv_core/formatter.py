"""Rewrites [[wikilinks]] into Markdown links built from a link format template."""

from __future__ import annotations

import re

from wikiconv_core.models import ConversionResult

PLACEHOLDER = "{}"

# Non-greedy so that "[[A]] and [[B]]" yields two matches, not one spanning both
_WIKILINK_RE = re.compile(r"\[\[(.*?)\]\]")
_MD_SUFFIX_RE = re.compile(r"\.md$")


def has_placeholder(template: str) -> bool:
    """Return True if the template contains the ``{}`` name placeholder."""
    return PLACEHOLDER in template


def link_name(body: str) -> str:
    """Resolve the target name of a wikilink body.

    The display alias after the first ``|`` is dropped, then a single
    trailing ``.md`` is removed: ``"Page.md|Shown"`` -> ``"Page"``.
    """
    name = body.split("|", 1)[0]
    return _MD_SUFFIX_RE.sub("", name)


def render_link(name: str, template: str) -> str:
    # Only the first placeholder is substituted
    link = template.replace(PLACEHOLDER, name, 1)
    return f"[{name}]({link})"


def format_links(text: str, template: str) -> ConversionResult:
    """Rewrite every wikilink in ``text`` as ``[name](link)``.

    Empty or whitespace-only links such as ``[[]]`` are left as they are,
    and so are malformed ones whose body holds a ``[`` (``[[[[a]]]]``,
    ``[[a [[b]]]]``). The output contains no rewritable links, so running it
    again with the same template reports ``changed=False``.
    """
    converted = 0

    def _rewrite_match(m: re.Match) -> str:
        nonlocal converted
        body = m.group(1)
        if not body.strip() or "[" in body:
            return m.group(0)
        converted += 1
        return render_link(link_name(body), template)

    new_text = _WIKILINK_RE.sub(_rewrite_match, text)
    return ConversionResult(changed=new_text != text, new_text=new_text, converted=converted)
