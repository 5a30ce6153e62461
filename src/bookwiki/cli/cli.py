"""CLI entrypoint: Typer app definition and command registration"""

import typer

from bookwiki.cli.commands import (
    delete_cmd, init_cmd, list_cmd, new_cmd, preview_cmd, render_cmd, save_cmd, show_cmd,
)


app = typer.Typer(name="bookwiki", no_args_is_help=True, help="Personal knowledge-base article editor")

app.command(name="init")(init_cmd)
app.command(name="new")(new_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="save")(save_cmd)
app.command(name="preview")(preview_cmd)
app.command(name="render")(render_cmd)
app.command(name="delete")(delete_cmd)
