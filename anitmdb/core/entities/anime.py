"""
Anime entity.

An anime subscription as seen by the title resolution layer: the raw title
coming from the feed, its single-release flag and its current season.
"""

from dataclasses import dataclass
from typing import Optional

from anitmdb.core.value_objects.media_record import MediaRecord, MediaType


@dataclass
class Anime:
    """
    Anime whose title is resolved against TMDB.

    Attributes:
        title: Raw title (may carry a year token and noisy spacing)
        ova: True for a movie/OVA (single release), False for a series
        season: Season number used to look up episode titles
        tmdb: Resolved TMDB record, owned by this anime only
    """

    title: str = ""
    ova: bool = False
    season: int = 1
    tmdb: Optional[MediaRecord] = None

    @property
    def media_type(self) -> MediaType:
        return MediaType.from_single_release(self.ova)

    def set_tmdb(self, record: Optional[MediaRecord]) -> None:
        """Replace the resolved record (None clears it)."""
        self.tmdb = record
