from starlette.requests import Request
from starlette.responses import JSONResponse
import aiohttp
import logging

from showfinder.services.templates import templates
from showfinder.services.tvmaze import get_episodes_of_show, get_shows_by_term, is_tvmaze_online
from showfinder.widget.events import RequestSuperseded

logger = logging.getLogger(__name__)

def render_page(request: Request, message=None, status_code=200):
    context = request.app.state.widget.context()
    context["message"] = message
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)

# route for home page
async def homepage(request: Request):
    return render_page(request)

# route for the search form
async def search(request: Request):
    form = await request.form()
    term = form.get("searchForm-term", "")
    widget = request.app.state.widget
    try:
        await widget.search_for_show_and_display(term)
    except RequestSuperseded:
        logger.info(f"search '{term}' superseded by a newer request")
    except aiohttp.ClientError as err:
        logger.error(f"search '{term}' failed: {err}")
        raise
    return render_page(request)

# route for the "Episodes" button of a show
async def episodes(request: Request):
    form = await request.form()
    show_id_form = form.get("show-id")  # "show-id" is taken from partials/show.html input name value
    try:  # validate input
        show_id = int(show_id_form)
    except (TypeError, ValueError):
        return render_page(request, message="Error: Invalid show id.", status_code=400)
    widget = request.app.state.widget
    try:
        await widget.get_episodes_and_display(show_id)
    except RequestSuperseded:
        logger.info(f"episodes of show {show_id} superseded by a newer request")
    except aiohttp.ClientError as err:
        logger.error(f"episodes of show {show_id} failed: {err}")
        raise
    return render_page(request)

# json api: /api/shows?q=house
async def api_shows(request: Request):
    term = request.query_params.get("q", "")
    try:
        shows = await get_shows_by_term(term, session=request.app.state.session)
    except aiohttp.ClientResponseError as err:
        return JSONResponse({"error": err.message}, status_code=err.status)
    return JSONResponse([show.as_dict() for show in shows])

# json api: /api/shows/118/episodes
async def api_episodes(request: Request):
    show_id = request.path_params["show_id"]
    try:
        episodes = await get_episodes_of_show(show_id, session=request.app.state.session)
    except aiohttp.ClientResponseError as err:
        return JSONResponse({"error": err.message}, status_code=err.status)
    return JSONResponse([episode.as_dict() for episode in episodes])

def health(request: Request):
    tvmaze_ok = is_tvmaze_online()
    return JSONResponse({"tvmaze": tvmaze_ok}, status_code=200 if tvmaze_ok else 503)
