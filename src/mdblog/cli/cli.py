"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import list_cmd, serve_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Serve a directory of Markdown posts as a blog")

app.command(name="serve")(serve_cmd)
app.command(name="list")(list_cmd)
