from urllib.parse import urljoin
import logging

import aiohttp
import requests

from showfinder.config import TVMAZE_API_URL, REQUEST_TIMEOUT
from showfinder.models import Episode, Show

logger = logging.getLogger(__name__)

# GET on the TVMaze api. errors (network, non-2xx status) are not handled here
async def fetch_json(path, params=None, session=None):
    url = urljoin(TVMAZE_API_URL, path)
    if session is None:
        timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)
        async with aiohttp.ClientSession(timeout=timeout) as aiosession:
            return await _get_json(aiosession, url, params)
    return await _get_json(session, url, params)

async def _get_json(aiosession, url, params):
    logger.debug(f"GET {url} params={params}")
    async with aiosession.get(url, params=params) as aioresponse:
        aioresponse.raise_for_status()
        return await aioresponse.json()

# search TV shows by name
async def get_shows_by_term(term: str, session=None) -> list[Show]:
    data = await fetch_json("search/shows", params={"q": term}, session=session)
    shows = [Show.from_api(result["show"]) for result in data]
    logger.info(f"search '{term}' returned {len(shows)} shows")
    return shows

# all episodes of a single TV show. an unknown show_id raises a 404 ClientResponseError
async def get_episodes_of_show(show_id: int, session=None) -> list[Episode]:
    data = await fetch_json(f"shows/{show_id}/episodes", session=session)
    episodes = [Episode.from_api(episode) for episode in data]
    logger.info(f"show {show_id} has {len(episodes)} episodes")
    return episodes

def is_service_online(name: str, url: str, timeout: int = 5) -> bool:
    try:
        response = requests.get(url, timeout=timeout)
        return response.status_code == 200
    except requests.RequestException as err:
        logger.warning(f"{name} check failed: {err}")
        return False

def is_tvmaze_online() -> bool:
    return is_service_online("TVmaze", urljoin(TVMAZE_API_URL, "shows/1"))
