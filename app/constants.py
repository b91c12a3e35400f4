import os

# ==================== Data Source ====================

DEFAULT_DATA_SOURCE = os.path.join("data", "adventure.yml")
DATA_SOURCE_ENV = "ADVENTURE_DATA_SOURCE"
DATA_REVISION_ENV = "ADVENTURE_DATA_REVISION"
LOG_LEVEL_ENV = "ADVENTURE_LOG_LEVEL"
FETCH_TIMEOUT = (3.0, 15.0)

# Cache buster fallback: installed distribution version, else DEV_REVISION
DISTRIBUTION_NAME = "adventure-finder"
DEV_REVISION = "dev"

# ==================== Dataset Fields ====================

UNKNOWN_RANK = "Unknown"
UNKNOWN_ADVENTURE = "Unknown Adventure"

# Adventure field carrying the award program references (string or list)
SPECIAL_PROGRAM_FIELDS = ("stem_nova", "special_program_tags")

# ==================== Display ====================

MAX_RANK_COLUMNS = 6

RANK_COLORS = {
    "lion":           {"color": "#FFD700", "text": "#7a5c00", "bg": "#FFF9E3"},
    "tiger":          {"color": "#FF8800", "text": "#7a3c00", "bg": "#FFF2E0"},
    "wolf":           {"color": "#D7263D", "text": "#fff",    "bg": "#FFE3E8"},
    "bear":           {"color": "#1E90FF", "text": "#fff",    "bg": "#E3F0FF"},
    "webelos":        {"color": "#2E8B57", "text": "#fff",    "bg": "#E3FFF0"},
    "arrow of light": {"color": "#20B2AA", "text": "#fff",    "bg": "#E0FFFF"},
}

DEFAULT_RANK_STYLE = {"color": "#363636", "text": "#fff", "bg": "#f5f7fa"}

EMPTY_SELECTION_MESSAGE = "Select a word cloud item to see matching requirements."
NO_MATCH_MESSAGE = "No requirements match the selected keywords."
LOAD_FAILED_MESSAGE = "Failed to load data."
