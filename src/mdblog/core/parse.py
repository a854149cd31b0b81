"""Post discovery, frontmatter extraction, and markdown-it rendering"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from mdblog.core.errors import MalformedPost
from mdblog.core.utils.dates import coerce_date


FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(.*?)\r?\n?^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
MD_EXTENSION = '.md'


class _PlainTimestampLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamp-shaped scalars as strings."""


_PlainTimestampLoader.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != 'tag:yaml.org,2002:timestamp']
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _load_yaml(text: str) -> Any:
    """safe_load, retrying with timestamps as strings when one is not a real date (e.g. 2024-02-30)."""
    try:
        return yaml.safe_load(text) or {}
    except ValueError:
        return yaml.load(text, Loader=_PlainTimestampLoader) or {}


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with the YAML header removed.

    Raises MalformedPost when the header is not valid YAML or not a mapping.
    """
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = _load_yaml(m.group(1))
    except yaml.YAMLError as e:
        raise MalformedPost(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(fm, dict):
        raise MalformedPost(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    return fm, text[m.end():]


def normalize_metadata(frontmatter: dict[str, Any]) -> dict[str, Any]:
    """Copy frontmatter with 'date' coerced to an aware UTC datetime."""
    metadata = {str(k): v for k, v in frontmatter.items()}
    metadata['date'] = coerce_date(frontmatter.get('date'))
    return metadata


def discover_posts(path: Path) -> list[Path]:
    """Return the .md files directly under path (extension matched case-insensitively), sorted by name."""
    return sorted(
        (p for p in path.iterdir() if p.is_file() and p.suffix.lower() == MD_EXTENSION),
        key=lambda p: p.name,
    )


def render_markdown(body: str, parser_config: str = 'gfm-like') -> str:
    """Convert a markdown body to HTML."""
    return _make_parser(parser_config).render(body)
