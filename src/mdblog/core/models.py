"""Post models shared by the repository, the loader and the web layer"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from mdblog.core.utils.dates import EPOCH


class Post(BaseModel):
    """One entry of a post listing; metadata is the raw front-matter with a normalized date."""
    slug: str
    filename: str
    metadata: dict[str, Any] = {}
    url: Optional[str] = None       # absolute URL, set by the page handlers

    @property
    def title(self) -> str:
        return str(self.metadata.get("title") or self.slug)

    @property
    def date(self) -> datetime:
        return self.metadata.get("date") or EPOCH


@dataclass
class RenderedPost:
    """A single post with its body converted to HTML."""
    slug:     str
    metadata: dict[str, Any]
    title:    str
    content:  str              # rendered HTML
