"""Shared fixtures: posts directory, post writer, and Flask test client"""

import logging
from pathlib import Path

import pytest

from mdblog.config import Settings
from mdblog.web.app import create_app


def _write_post(directory: Path, slug: str, body: str = "Body.\n", **frontmatter) -> Path:
    """Write '<slug>.md' with a YAML header built from frontmatter (values written verbatim)."""
    header = "".join(f"{k}: {v}\n" for k, v in frontmatter.items())
    text = f"---\n{header}---\n{body}" if frontmatter else body
    path = directory / f"{slug}.md"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers attached by setup_logger so streams from one test don't leak into the next."""
    yield
    logger = logging.getLogger("mdblog")
    for h in list(logger.handlers):
        logger.removeHandler(h)


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    d = tmp_path / "posts"
    d.mkdir()
    return d


@pytest.fixture(name="app")
def app_fixture(posts_dir):
    app = create_app(Settings(posts_dir=str(posts_dir)))
    app.config["TESTING"] = True
    return app


@pytest.fixture(name="client")
def client_fixture(app):
    return app.test_client()


@pytest.fixture(name="make_post")
def make_post_fixture():
    return _write_post
