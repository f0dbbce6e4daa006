"""Errors raised while writing sitemap files."""


class SitemapError(Exception):
    """Base class for sitemap writing failures.

    Attributes:
        message: Description of the underlying platform error.
    """

    prefix: str = 'Sitemap error'

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class SitemapFileOpenError(SitemapError):
    """The target file could not be created or truncated."""

    prefix = 'Failed to open file'


class SitemapWriteError(SitemapError):
    """A write or the final flush to the target file failed."""

    prefix = 'Failed to write'
