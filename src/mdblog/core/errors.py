"""Exception hierarchy for post loading and rendering"""


class BlogError(Exception):
    """Base class for all mdblog errors."""


class PostNotFound(BlogError):
    """No post file exists for the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"No post for slug {slug!r}")
        self.slug = slug


class MalformedPost(BlogError, ValueError):
    """A post file could not be parsed (bad front-matter)."""


class RenderError(BlogError):
    """A requested post could not be read or converted to HTML."""

    def __init__(self, slug: str, cause: Exception):
        super().__init__(f"Failed to render post {slug!r}: {cause}")
        self.slug = slug
        self.cause = cause


class DirectoryInitError(BlogError):
    """The posts directory is missing and could not be created."""
