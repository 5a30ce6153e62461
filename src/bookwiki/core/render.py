"""Read-mode article rendering: anchored body blocks, infobox sidebar, table of contents"""

from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from bookwiki.core.infobox import DEFAULT_TITLE, render_table
from bookwiki.core.models import Article, ContentBlock, HeadingBlock, InfoboxBlock
from bookwiki.core.rewrite import make_parser, render_preview


@dataclass
class RenderedArticle:
    """HTML fragments for one article."""
    body:    str
    sidebar: str
    toc:     list[tuple[str, str]] = field(default_factory=list)   # (anchor, heading text)


def block_anchor(block: ContentBlock) -> str:
    """Return the in-document anchor for a block, derived from its id."""
    return f"block-{block.id}"


def table_of_contents(blocks: list[ContentBlock]) -> list[tuple[str, str]]:
    """Return (anchor, text) for each heading block in document order."""
    return [(block_anchor(b), b.text) for b in blocks if isinstance(b, HeadingBlock)]


def render_block(block: ContentBlock, parser: MarkdownIt, title: str = DEFAULT_TITLE) -> str:
    """Render a single block to HTML. Paragraphs go through the markdown engine."""
    if isinstance(block, HeadingBlock):
        return f"<h2>{escapeHtml(block.text)}</h2>\n"
    if isinstance(block, InfoboxBlock):
        return render_table(block.entries, title)
    return render_preview(block.text, parser, title)


def render_article(article: Article, parser: MarkdownIt = None, title: str = DEFAULT_TITLE) -> RenderedArticle:
    """Render body blocks wrapped in anchored divs; infoboxes are collected into the sidebar."""
    md = parser or make_parser()
    body, sidebar = [], []
    for block in article.blocks:
        if isinstance(block, InfoboxBlock):
            sidebar.append(render_block(block, md, title))
            continue
        body.append(f'<div id="{block_anchor(block)}">\n{render_block(block, md, title)}</div>\n')
    return RenderedArticle(
        body="".join(body),
        sidebar="".join(sidebar),
        toc=table_of_contents(article.blocks),
    )
