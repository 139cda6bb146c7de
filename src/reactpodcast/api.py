"""FastAPI app serving the episode listing as JSON."""

import httpx
import structlog
from fastapi import Depends, FastAPI, HTTPException, Query

from reactpodcast import __version__
from reactpodcast.config import SimplecastSettings
from reactpodcast.simplecast import EpisodeFetcher, SimplecastError
from reactpodcast.simplecast.models import EpisodeStatus

logger = structlog.get_logger(__name__)

app = FastAPI(
    title="reactpodcast",
    description="React Podcast - Episode API",
    version=__version__,
)


def get_fetcher() -> EpisodeFetcher:
    # Fresh settings per request so token changes apply immediately
    return EpisodeFetcher(SimplecastSettings())


@app.get("/episodes.json")
async def list_episodes(
    status: EpisodeStatus | None = Query(default=None, description="Only this status"),
    fetcher: EpisodeFetcher = Depends(get_fetcher),
):
    """List the podcast's episodes."""
    try:
        response = await fetcher.fetch()
    # ValueError covers JSON and UTF-8 decode failures
    except (httpx.HTTPError, ValueError, SimplecastError) as e:
        logger.error("Episode fetch failed", error=str(e))
        raise HTTPException(status_code=502, detail="Upstream episode service unavailable") from e

    if response is None:
        raise HTTPException(status_code=404, detail="No episodes available")

    body = response.body.with_status(status) if status else response.body
    return body.model_dump(mode="json", exclude_none=True)
