"""Page handlers: home, blog listing, and post detail"""

from pathlib import Path

from flask import Blueprint, current_app, render_template, request

from mdblog.core.models import Post
from mdblog.core.posts import list_posts, load_post


bp = Blueprint("blog", __name__)


def _base_url() -> str:
    return f"{request.scheme}://{request.host}"


def _with_urls(posts: list[Post]) -> list[Post]:
    base = _base_url()
    return [p.model_copy(update={"url": f"{base}/blog/{p.slug}"}) for p in posts]


def _posts_dir() -> Path:
    return Path(current_app.config["SETTINGS"].posts_dir)


@bp.route("/")
def index():
    limit = current_app.config["SETTINGS"].index_limit
    posts = list_posts(_posts_dir())
    return render_template(
        "index.html",
        title="index",
        url=request.host,
        posts=_with_urls(posts[:limit]),
        has_more=len(posts) > limit,
    )


@bp.route("/blog")
def blogs():
    return render_template("blogs.html", title="blog", posts=_with_urls(list_posts(_posts_dir())))


@bp.route("/blog/<slug>")
def post(slug: str):
    settings = current_app.config["SETTINGS"]
    rendered = load_post(_posts_dir(), slug, settings.parser_config)
    return render_template(
        "post.html",
        metadata=rendered.metadata,
        title=rendered.title,
        content=rendered.content,
    )
