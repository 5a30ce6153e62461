"""Infobox token rewriting over a markdown-it token stream, and live preview rendering.

Tokens are handled by shape only: a fenced code token has ``type == "fence"``,
a language tag in ``info`` and its body in ``content``; any token may carry a
``children`` list that is walked depth-first.
"""

import logging

from markdown_it import MarkdownIt

from bookwiki.core.infobox import DEFAULT_TITLE, is_infobox_lang, parse_entries, render_table


logger = logging.getLogger(__name__)


def make_parser(preset: str = "gfm-like") -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def is_infobox_token(token) -> bool:
    """True for a fenced code token tagged as an infobox."""
    return token.type == "fence" and is_infobox_lang(token.info)


def rewrite_token(token, title: str = DEFAULT_TITLE) -> None:
    """Turn an infobox fence token into a raw HTML token holding the rendered table."""
    entries = parse_entries(token.content.split("\n"))
    token.type = "html_block"
    token.content = render_table(entries, title)
    # cleared so a second pass leaves the token alone
    token.info = ""


def rewrite_infoboxes(tokens: list, title: str = DEFAULT_TITLE) -> list:
    """Rewrite every infobox fence in place, recursing into children. Returns tokens."""
    for token in tokens:
        if is_infobox_token(token):
            rewrite_token(token, title)
            logger.debug("Rewrote infobox fence at lines %s", token.map)
        if token.children:
            rewrite_infoboxes(token.children, title)
    return tokens


def render_preview(markdown: str, parser: MarkdownIt | None = None, title: str = DEFAULT_TITLE) -> str:
    """Lex markdown, rewrite infobox fences into tables, and render the tokens to HTML."""
    md = parser or make_parser()
    env: dict = {}
    tokens = rewrite_infoboxes(md.parse(markdown, env), title)
    return md.renderer.render(tokens, md.options, env)
