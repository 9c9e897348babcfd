import os

TVMAZE_API_URL = os.getenv("TVMAZE_API_URL", "http://api.tvmaze.com/")
# shown for shows that come without an image
MISSING_IMAGE_URL = os.getenv("MISSING_IMAGE_URL", "https://tinyurl.com/missing-tv")
REQUEST_TIMEOUT = int(os.getenv("SHOWFINDER_REQUEST_TIMEOUT", "10"))

LOG_DIR = os.getenv("SHOWFINDER_LOG_DIR", "data/log")
LOG_LEVEL = os.getenv("SHOWFINDER_LOG_LEVEL", "INFO").upper()

DEBUG = os.getenv("SHOWFINDER_DEBUG", "0").lower() in ("1", "true", "yes")
