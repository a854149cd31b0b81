"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.errors import DirectoryInitError
from mdblog.core.posts import list_posts
from mdblog.logger import setup_logger
from mdblog.web.app import create_app


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def serve_cmd(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Listening port")] = None,
    posts: Annotated[Optional[str], typer.Option("--posts-dir", help="Directory of Markdown posts")] = None,
    debug: Annotated[Optional[bool], typer.Option("--debug/--no-debug", help="Flask debug mode")] = None,
    ):
    """Run the blog with the Flask development server."""
    settings = _settings(overrides={"host": host, "port": port, "posts_dir": posts, "debug": debug})
    logger = setup_logger(settings.log_level)
    app = create_app(settings)
    logger.info("Server running at http://localhost:%d (posts: %s)", settings.port, settings.posts_dir)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


def list_cmd(
    posts: Annotated[Optional[str], typer.Option("--posts-dir", help="Directory of Markdown posts")] = None,
    ):
    """List posts newest first: date, slug, title."""
    settings = _settings(overrides={"posts_dir": posts})
    setup_logger(settings.log_level)
    try:
        found = list_posts(Path(settings.posts_dir))
    except DirectoryInitError as e:
        _fail("Cannot list posts", e)
    if not found:
        typer.echo(f"No posts found in {settings.posts_dir}/")
        raise typer.Exit(1)
    for post in found:
        typer.echo(f"{post.date:%Y-%m-%d}  {post.slug}  {post.title}")
