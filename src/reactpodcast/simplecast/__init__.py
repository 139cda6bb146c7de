"""Simplecast API access for podcast episode listings."""

from reactpodcast.simplecast.client import EpisodeFetcher, fetch_episodes
from reactpodcast.simplecast.models import (
    Episode,
    EpisodeCollection,
    EpisodeList,
    EpisodeResponse,
    SimplecastError,
    UpstreamShapeError,
)

__all__ = [
    "EpisodeFetcher",
    "fetch_episodes",
    "Episode",
    "EpisodeCollection",
    "EpisodeList",
    "EpisodeResponse",
    "SimplecastError",
    "UpstreamShapeError",
]
