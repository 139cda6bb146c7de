"""Simplecast episode fetcher.

Requests the podcast's episode listing from the Simplecast REST API and
returns it as an EpisodeResponse envelope.
"""

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from reactpodcast.config import SimplecastSettings
from reactpodcast.simplecast.models import EpisodeResponse, SimplecastEpisodePage

logger = structlog.get_logger(__name__)


class EpisodeFetcher:
    """Fetches the episode list for one Simplecast podcast."""

    def __init__(
        self,
        settings: SimplecastSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            settings: Simplecast configuration. The token is read from it on
                every call.
            transport: Optional httpx transport (used to stub the API).
        """
        self.settings = settings
        self.transport = transport
        self.logger = logger.bind(component="episode_fetcher", podcast_id=settings.podcast_id)

    @property
    def params(self) -> dict[str, int]:
        return {"limit": self.settings.limit, "offset": self.settings.offset}

    def _headers(self) -> dict[str, str]:
        return {"authorization": f"Bearer {self.settings.token.get_secret_value()}"}

    async def fetch(self) -> EpisodeResponse | None:
        """Fetch the episode listing.

        Returns:
            EpisodeResponse with the parsed episodes, or None when the API
            answers with a falsy JSON body (null, "", {}, [], 0 or false).

        Raises:
            httpx.TransportError: On network failure.
            httpx.HTTPStatusError: On a non-2xx response.
            json.JSONDecodeError: If the body is not JSON.
            UpstreamShapeError: If the JSON is not an episode listing.
        """
        self.logger.info("Fetching episodes", url=self.settings.episodes_url, **self.params)

        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.settings.max_attempts),
            wait=wait_exponential(multiplier=self.settings.retry_backoff_seconds, max=30),
            reraise=True,
        ):
            with attempt:
                payload = await self._get_json()

        if not payload:
            self.logger.warning("Episode listing was empty", payload=repr(payload))
            return None

        collection = SimplecastEpisodePage.parse(payload).to_collection()

        self.logger.info(
            "Fetched episodes",
            episode_count=len(collection.episodes.collection),
        )

        return EpisodeResponse(body=collection)

    async def _get_json(self):
        """Perform a single GET and decode the body."""
        async with httpx.AsyncClient(
            timeout=self.settings.timeout_seconds,
            transport=self.transport,
        ) as client:
            response = await client.get(
                self.settings.episodes_url,
                params=self.params,
                headers=self._headers(),
            )
            response.raise_for_status()
            return response.json()


async def fetch_episodes(settings: SimplecastSettings | None = None) -> EpisodeResponse | None:
    """Fetch episodes using the given settings or fresh ones from the environment.

    Settings are loaded per call when not supplied, so a rotated token is
    picked up without a restart.
    """
    return await EpisodeFetcher(settings or SimplecastSettings()).fetch()
