"""Episode models and the Simplecast wire format.

Internal consumers depend on Episode, EpisodeCollection and EpisodeResponse.
The Simplecast* models describe the vendor's JSON layout and are only used to
translate an API response into the internal shape.
"""

from datetime import datetime
from typing import Any, Literal, get_args

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = structlog.get_logger(__name__)

EpisodeStatus = Literal["published", "draft"]


class SimplecastError(Exception):
    """Base class for errors raised by the Simplecast client."""

    pass


class UpstreamShapeError(SimplecastError):
    """Raised when the API returns JSON that is not an episode listing."""

    pass


class Episode(BaseModel):
    """A single podcast episode."""

    status: EpisodeStatus = Field(description="Publication status")
    title: str = Field(description="Episode title")
    id: str | None = Field(default=None, description="Simplecast episode ID")
    number: int | None = Field(default=None, description="Episode number if available")
    season_number: int | None = Field(default=None, description="Season number if available")
    published_at: datetime | None = Field(default=None, description="Publication date")
    description: str | None = Field(default=None, description="Episode description")


class EpisodeList(BaseModel):
    """Ordered list of episodes."""

    collection: list[Episode] = Field(default_factory=list)


class EpisodeCollection(BaseModel):
    """Episodes keyed the way the site consumes them."""

    episodes: EpisodeList = Field(default_factory=EpisodeList)

    def with_status(self, status: EpisodeStatus) -> "EpisodeCollection":
        """Return a copy holding only episodes with the given status."""
        kept = [ep for ep in self.episodes.collection if ep.status == status]
        return EpisodeCollection(episodes=EpisodeList(collection=kept))


class EpisodeResponse(BaseModel):
    """Envelope returned by the episode fetch."""

    body: EpisodeCollection

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize without absent optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class SimplecastSeason(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: int | None = None


class SimplecastEpisode(BaseModel):
    """One entry of the API's episode ``collection``."""

    model_config = ConfigDict(extra="ignore")

    status: str
    title: str
    id: str | None = None
    number: int | None = None
    season: SimplecastSeason | None = None
    published_at: datetime | None = None
    description: str | None = None

    def to_episode(self) -> Episode | None:
        """Translate to an Episode, or None for statuses we do not serve."""
        if self.status not in get_args(EpisodeStatus):
            logger.warning(
                "Skipping episode with unsupported status",
                title=self.title,
                status=self.status,
            )
            return None

        return Episode(
            status=self.status,
            title=self.title,
            id=self.id,
            number=self.number,
            season_number=self.season.number if self.season else None,
            published_at=self.published_at,
            description=self.description or None,
        )


class SimplecastEpisodePage(BaseModel):
    """A page of the episode listing as returned by the API."""

    model_config = ConfigDict(extra="ignore")

    collection: list[SimplecastEpisode]
    count: int | None = None

    @classmethod
    def parse(cls, payload: Any) -> "SimplecastEpisodePage":
        """Validate decoded JSON against the listing layout.

        Raises:
            UpstreamShapeError: If the payload is not an episode listing.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise UpstreamShapeError(f"Unexpected episode listing layout: {e}") from e

    def to_collection(self) -> EpisodeCollection:
        """Translate the page into the internal collection, keeping order."""
        episodes = [ep for ep in (item.to_episode() for item in self.collection) if ep]
        return EpisodeCollection(episodes=EpisodeList(collection=episodes))
