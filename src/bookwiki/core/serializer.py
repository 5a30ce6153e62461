"""Conversion between an ordered block list and flat markdown text.

The parse direction is a single forward scan over lines with two states,
normal text and inside an infobox fence. It never fails: unterminated
fences and malformed infobox rows are dropped. Ids are minted fresh on
every parse.
"""

import logging
import re

from bookwiki.core.infobox import INFOBOX_END, INFOBOX_START, parse_entries
from bookwiki.core.models import ContentBlock, HeadingBlock, InfoboxBlock, ParagraphBlock


logger = logging.getLogger(__name__)

HEADING_MARKER_RE = re.compile(r'^#+\s*')
BLOCK_SEPARATOR = "\n\n"


def _block_to_markdown(block: ContentBlock) -> str:
    if isinstance(block, HeadingBlock):
        return f"## {block.text}"
    if isinstance(block, InfoboxBlock):
        lines = [INFOBOX_START, *(f"{k}: {v}" for k, v in block.entries), INFOBOX_END]
        return "\n".join(lines)
    return block.text


def blocks_to_markdown(blocks: list[ContentBlock]) -> str:
    """Render blocks to markdown, separated by one blank line. Headings are always level 2."""
    return BLOCK_SEPARATOR.join(_block_to_markdown(b) for b in blocks)


def markdown_to_blocks(markdown: str) -> list[ContentBlock]:
    """Parse markdown into an ordered block list with freshly generated ids."""
    blocks: list[ContentBlock] = []
    paragraph: list[str] = []
    infobox: list[str] = []
    inside_infobox = False

    def flush_paragraph() -> None:
        text = "\n".join(paragraph).strip()
        if text:
            blocks.append(ParagraphBlock(text=text))
        paragraph.clear()

    for line in markdown.split("\n"):
        stripped = line.strip()

        if inside_infobox:
            if stripped == INFOBOX_END:
                blocks.append(InfoboxBlock(entries=parse_entries(infobox)))
                infobox.clear()
                inside_infobox = False
            else:
                infobox.append(line)
            continue

        if stripped.lower().startswith(INFOBOX_START):
            flush_paragraph()
            inside_infobox = True
        elif stripped.startswith("#"):
            flush_paragraph()
            blocks.append(HeadingBlock(text=HEADING_MARKER_RE.sub("", stripped)))
        elif not stripped:
            flush_paragraph()
        else:
            paragraph.append(line)

    if inside_infobox:
        logger.debug("Unterminated infobox fence dropped (%d buffered lines)", len(infobox))
    flush_paragraph()
    return blocks
