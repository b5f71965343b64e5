from dsmovie.config.paths import *

VERSION = "0.1.0"
API_TITLE = "DSMovie API"
API_DESCRIPTION = "API for movie listing and user scores"

# paging
DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 100

# allowed score range (inclusive)
SCORE_MIN = 0.0
SCORE_MAX = 5.0


def validate_config():
    if SCORE_MIN >= SCORE_MAX:
        raise ValueError("SCORE_MIN must be less than SCORE_MAX")
    if not 0 < DEFAULT_PAGE_SIZE <= MAX_PAGE_SIZE:
        raise ValueError("DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE")


validate_config()
