# golden tests against the real TVMaze api; they break when TVMaze data changes

import asyncio
import os

import aiohttp
import pytest

from showfinder.services.tvmaze import get_episodes_of_show, get_shows_by_term

pytestmark = [
    pytest.mark.live,
    pytest.mark.skipif(os.getenv("SHOWFINDER_LIVE_TESTS") != "1", reason="set SHOWFINDER_LIVE_TESTS=1"),
]


def test_search_house():
    shows = asyncio.run(get_shows_by_term("House"))
    assert [show.id for show in shows] == [118, 23583, 68664, 56469, 1251, 67139, 4987, 58961, 3081, 44386]


def test_search_without_matches():
    assert asyncio.run(get_shows_by_term("squeamish ossifrage")) == []


def test_episodes_of_house():
    assert len(asyncio.run(get_episodes_of_show(118))) == 176


def test_episodes_of_unknown_show():
    with pytest.raises(aiohttp.ClientResponseError) as excinfo:
        asyncio.run(get_episodes_of_show(0))
    assert "404" in str(excinfo.value)
