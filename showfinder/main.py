from contextlib import asynccontextmanager
from pathlib import Path

from starlette.applications import Starlette
from starlette.routing import Route, Mount
from starlette.staticfiles import StaticFiles
import aiohttp
import uvicorn

# startup functions
from showfinder.config import DEBUG, REQUEST_TIMEOUT
from showfinder.log_config import setup_logging
from showfinder.widget.events import SearchWidget

# web routes
from showfinder.routes.web_routes import homepage, search, episodes, api_shows, api_episodes, health

STATIC_DIR = Path(__file__).parent / "static"

@asynccontextmanager
async def lifespan(app):
    setup_logging()
    session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT))
    app.state.session = session
    app.state.widget = SearchWidget(session=session)
    try:
        yield
    finally:
        await session.close()

routes = [
    Route("/", endpoint=homepage, methods=["GET"]),
    Mount("/static", app=StaticFiles(directory=str(STATIC_DIR)), name="static"),
    Route("/search", endpoint=search, methods=["POST"]),
    Route("/episodes", endpoint=episodes, methods=["POST"]),
    Route("/api/shows", endpoint=api_shows, methods=["GET"]),
    Route("/api/shows/{show_id:int}/episodes", endpoint=api_episodes, methods=["GET"]),
    Route("/health", endpoint=health, methods=["GET"]),
]

app = Starlette(debug=DEBUG, routes=routes, lifespan=lifespan)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
