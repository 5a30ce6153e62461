"""Infobox wire format: fence markers, row parsing, and table HTML"""

import logging
from typing import Iterable

from markdown_it.common.utils import escapeHtml


logger = logging.getLogger(__name__)

INFOBOX_LANG = "infobox"
INFOBOX_START = "```" + INFOBOX_LANG
INFOBOX_END = "```"
DEFAULT_TITLE = "Досье"


def is_infobox_lang(lang: str | None) -> bool:
    """True if a fence language tag names an infobox (case and surrounding whitespace ignored)."""
    return (lang or "").strip().lower() == INFOBOX_LANG


def parse_entry(line: str) -> tuple[str, str] | None:
    """Split a row on the first ':' into (key, value); None if there is no colon or no key."""
    key, sep, value = line.partition(":")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()


def parse_entries(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Parse infobox body lines into ordered entries, dropping malformed rows."""
    entries = []
    for line in lines:
        entry = parse_entry(line)
        if entry is None:
            if line.strip():
                logger.debug("Dropped infobox row without key: %r", line)
            continue
        entries.append(entry)
    return entries


def render_table(entries: list[tuple[str, str]], title: str = DEFAULT_TITLE) -> str:
    """Render entries as a captioned two-column HTML table. Zero entries give an empty tbody."""
    rows = "".join(
        '<tr class="infobox-row">'
        f'<th class="infobox-key">{escapeHtml(key)}</th>'
        f'<td class="infobox-value">{escapeHtml(value)}</td>'
        '</tr>\n'
        for key, value in entries
    )
    return (
        '<div class="infobox">\n'
        f'<div class="infobox-title">{escapeHtml(title)}</div>\n'
        '<table class="infobox-table">\n'
        f'<tbody>\n{rows}</tbody>\n'
        '</table>\n'
        '</div>\n'
    )
