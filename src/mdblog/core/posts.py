"""Post repository: directory listing and single-post loading"""

from pathlib import Path

from mdblog.core.errors import DirectoryInitError, PostNotFound, RenderError
from mdblog.core.models import Post, RenderedPost
from mdblog.core.parse import (
    MD_EXTENSION,
    discover_posts,
    normalize_metadata,
    render_markdown,
    split_frontmatter,
)
from mdblog.logger import logger


def _ensure_dir(posts_dir: Path) -> bool:
    """Create posts_dir if missing. Return True when it already existed."""
    if posts_dir.is_dir():
        return True
    try:
        posts_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryInitError(f"Cannot create posts directory {posts_dir}: {e}") from e
    logger.info("Created empty posts directory %s", posts_dir)
    return False


def read_post(path: Path) -> Post:
    """Read and parse one post file; raises OSError, UnicodeDecodeError or MalformedPost."""
    frontmatter, _ = split_frontmatter(path.read_text(encoding='utf-8'))
    return Post(
        slug=path.name[:-len(MD_EXTENSION)],
        filename=path.name,
        metadata=normalize_metadata(frontmatter),
    )


def list_posts(posts_dir: Path) -> list[Post]:
    """Return every readable post in posts_dir, newest first.

    Files that cannot be read or parsed are logged and skipped. Posts sharing
    a date keep filename order.
    """
    posts_dir = Path(posts_dir)
    if not _ensure_dir(posts_dir):
        return []

    posts = []
    for path in discover_posts(posts_dir):
        try:
            posts.append(read_post(path))
        except (OSError, ValueError) as e:
            logger.warning("Failed to read post file: %s (%s)", path.name, e)
    return sorted(posts, key=lambda p: p.date, reverse=True)


def _post_path(posts_dir: Path, slug: str) -> Path:
    if not slug or slug.startswith('.') or '/' in slug or '\\' in slug:
        raise PostNotFound(slug)
    path = Path(posts_dir) / f"{slug}{MD_EXTENSION}"
    if path.is_file():
        return path
    # listings accept any extension case, e.g. "notes.MD"
    if Path(posts_dir).is_dir():
        for candidate in discover_posts(Path(posts_dir)):
            if candidate.stem == slug:
                return candidate
    raise PostNotFound(slug)


def load_post(posts_dir: Path, slug: str, parser_config: str = 'gfm-like') -> RenderedPost:
    """Load a single post by slug and render its body to HTML.

    Raises PostNotFound when there is no '<slug>.md' file and RenderError when
    the file cannot be read, parsed, or rendered.
    """
    path = _post_path(posts_dir, slug)
    try:
        frontmatter, body = split_frontmatter(path.read_text(encoding='utf-8'))
        content = render_markdown(body, parser_config)
    except Exception as e:
        logger.error("Error rendering post %s: %s", slug, e)
        raise RenderError(slug, e) from e

    metadata = normalize_metadata(frontmatter)
    return RenderedPost(
        slug=slug,
        metadata=metadata,
        title=str(frontmatter.get('title') or slug),
        content=content,
    )
