"""CLI command implementations"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Iterator, Optional

import typer
from markdown_it.common.utils import escapeHtml
from sqlmodel import Session, SQLModel

from bookwiki.config import Settings, load_config
from bookwiki.core.articles import create_article, delete_article, load_for_editing, save_from_markdown
from bookwiki.core.render import render_article
from bookwiki.core.rewrite import make_parser, render_preview
from bookwiki.crud.database import init_db, make_engine
from bookwiki.crud.sql_store import SQLStore


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


@contextmanager
def _store(settings: Settings) -> Iterator[SQLStore]:
    """Open a session-backed store on the configured database."""
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        yield SQLStore(session)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def _write_or_echo(text: str, out: Optional[Path]) -> None:
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {out}")


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize database schema. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        SQLModel.metadata.drop_all(engine)
        typer.echo("Existing data cleared.")
    init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def new_cmd(
    title: Annotated[str, typer.Argument(help="Article title")],
    category: Annotated[Optional[str], typer.Option("--category", help="Category id")] = None,
    ):
    """Create a new article with a starter heading and paragraph."""
    settings = _settings()
    with _store(settings) as store:
        article = create_article(store, title, category)
    typer.echo(article.id)


def list_cmd():
    """List stored articles, most recently modified first."""
    settings = _settings()
    with _store(settings) as store:
        articles = store.list()
    if not articles:
        typer.echo("No articles found in database.")
        raise typer.Exit(1)
    for a in articles:
        tags = f" [{', '.join(a.tags)}]" if a.tags else ""
        typer.echo(f"{a.id}  {a.last_modified:%Y-%m-%d %H:%M}  {a.title}{tags}")


def show_cmd(
    article_id: Annotated[str, typer.Argument(help="Article id")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write markdown to this file")] = None,
    ):
    """Print an article as editable markdown."""
    settings = _settings()
    with _store(settings) as store:
        try:
            text = load_for_editing(store, article_id)
        except ValueError as e:
            _fail(str(e))
    _write_or_echo(text, out)


def save_cmd(
    article_id: Annotated[str, typer.Argument(help="Article id")],
    path: Annotated[Path, typer.Argument(help="Markdown file with the edited article body")],
    title: Annotated[Optional[str], typer.Option("--title", help="New title")] = None,
    tags: Annotated[Optional[list[str]], typer.Option("--tag", help="Replace tags (repeatable)")] = None,
    ):
    """Replace an article's blocks with the contents of a markdown file."""
    settings = _settings()
    markdown = _read(path)
    with _store(settings) as store:
        try:
            article = save_from_markdown(store, article_id, markdown, title=title, tags=tags or None)
        except ValueError as e:
            _fail(str(e))
    typer.echo(f"Saved {article.id}: {len(article.blocks)} block(s)")


def preview_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to preview")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML to this file")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Render raw markdown to HTML with infobox fences shown as tables."""
    settings = _settings(overrides={"parser_config": parser})
    html = render_preview(_read(path), make_parser(settings.parser_config), settings.infobox_title)
    _write_or_echo(html, out)


def render_cmd(
    article_id: Annotated[str, typer.Argument(help="Article id")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write HTML to this file")] = None,
    ):
    """Render a stored article to read-mode HTML with a table of contents."""
    settings = _settings()
    with _store(settings) as store:
        article = store.get(article_id)
    if article is None:
        _fail(f"Article {article_id} not found")

    rendered = render_article(article, make_parser(settings.parser_config), settings.infobox_title)
    toc = "".join(f'<li><a href="#{anchor}">{escapeHtml(text)}</a></li>\n' for anchor, text in rendered.toc)
    html = (
        f"<h1>{escapeHtml(article.title)}</h1>\n"
        f'<nav class="toc">\n<ul>\n{toc}</ul>\n</nav>\n'
        f'<article>\n{rendered.body}</article>\n'
        f'<aside>\n{rendered.sidebar}</aside>\n'
    )
    _write_or_echo(html, out)


def delete_cmd(
    article_id: Annotated[str, typer.Argument(help="Article id")],
    ):
    """Delete an article."""
    settings = _settings()
    with _store(settings) as store:
        try:
            delete_article(store, article_id)
        except ValueError as e:
            _fail(str(e))
    typer.echo(f"Deleted {article_id}")
