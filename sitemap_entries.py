"""Record types consumed by the sitemap writers.

This module defines the data carried by each sitemap document:
- UrlEntry for <url> elements of a URL-set sitemap
- SitemapIndexEntry for <sitemap> elements of a sitemap index
- ChangeFrequency for the <changefreq> hint
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ChangeFrequency(str, Enum):
    """How frequently the content at a URL is likely to change.

    The value of each member is its canonical text in the sitemap protocol.
    """

    ALWAYS = 'always'
    HOURLY = 'hourly'
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'
    YEARLY = 'yearly'
    NEVER = 'never'  # archived URLs

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UrlEntry:
    """A single page listed in a URL-set sitemap.

    Attributes:
        location: URL of the page. The only required field; escaped on output.
        last_modified: Date of last modification in W3C Datetime format
            (e.g. '2024-01-15' or '2024-01-15T12:00:00+00:00'). Not validated.
        change_frequency: Expected update cadence of the page.
        priority: Priority relative to other URLs of the site, 0.0 to 1.0.
            Not validated or clamped.
    """

    location: str
    last_modified: Optional[str] = None
    change_frequency: Optional[ChangeFrequency] = None
    priority: Optional[float] = None


@dataclass(frozen=True)
class SitemapIndexEntry:
    """A single sitemap file referenced from a sitemap index.

    Attributes:
        location: URL of the sitemap file. Escaped on output.
        last_modified: Date of last modification of the sitemap file.
    """

    location: str
    last_modified: Optional[str] = None
