import asyncio
import logging

from showfinder.services.tvmaze import get_episodes_of_show, get_shows_by_term
from showfinder.widget.regions import DisplayRegion
from showfinder.widget.render import populate_episodes, populate_shows

logger = logging.getLogger(__name__)

SEARCH = "search"
EPISODES = "episodes"


# raised to a caller whose in-flight request was replaced by a newer one
class RequestSuperseded(Exception):
    def __init__(self, slot):
        super().__init__(f"{slot} request superseded by a newer one")
        self.slot = slot


# search form plus show and episode lists of a single page.
# handlers fetch first and render afterwards, so a failed fetch leaves the regions as they were.
# a new search cancels any search or episode fetch in flight; a new episode fetch cancels the previous one
class SearchWidget:
    def __init__(self, shows_list=None, episodes_list=None, episodes_area=None, session=None):
        self.shows_list = shows_list or DisplayRegion("showsList")
        self.episodes_list = episodes_list or DisplayRegion("episodesList")
        self.episodes_area = episodes_area or DisplayRegion("episodesArea", visible=False)
        self.session = session
        self.term = None
        self._inflight = {}

    # form submit handler
    async def search_for_show_and_display(self, term):
        self._cancel(EPISODES)
        return await self._run(SEARCH, self._search(term))

    # click handler of a show's "Episodes" button
    async def get_episodes_and_display(self, show_id):
        return await self._run(EPISODES, self._episodes(show_id))

    async def _search(self, term):
        shows = await get_shows_by_term(term, session=self.session)

        self.term = term
        self.episodes_area.hide()
        populate_shows(self.shows_list, shows)
        return shows

    async def _episodes(self, show_id):
        episodes = await get_episodes_of_show(show_id, session=self.session)
        populate_episodes(self.episodes_list, self.episodes_area, episodes)
        return episodes

    def _cancel(self, slot):
        task = self._inflight.pop(slot, None)
        if task is not None and not task.done():
            logger.debug(f"cancelling in-flight {slot} request")
            task.cancel()

    async def _run(self, slot, coro):
        self._cancel(slot)
        task = asyncio.ensure_future(coro)
        self._inflight[slot] = task
        try:
            return await task
        except asyncio.CancelledError:
            # cancelled by a newer request rather than by our own caller
            if self._inflight.get(slot) is not task:
                raise RequestSuperseded(slot) from None
            raise
        finally:
            if self._inflight.get(slot) is task:
                del self._inflight[slot]

    # regions and flags the page template needs
    def context(self):
        return {
            "term": self.term,
            "shows_list": self.shows_list,
            "episodes_list": self.episodes_list,
            "episodes_area": self.episodes_area,
            "scroll_to_episodes": self.episodes_list.consume_scroll(),
        }
