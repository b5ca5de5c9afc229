"""Constants for the Advent Calendar integration."""
DOMAIN = "advent_calendar"
PLATFORMS = ["sensor", "select"]

CONF_START_DATE = "start_date"
CONF_TITLE = "title"
DEFAULT_TITLE = "Advent Calendar"

STORAGE_VERSION = 1
STORAGE_KEY = f"{DOMAIN}_progress"
SAVE_DELAY = 1  # seconds

# One record per entity, namespaced like the browser keys they replace
KEY_OPENED = "christmas:advent:opened"
KEY_COMPLETED = "christmas:advent:completed"
KEY_BADGES = "christmas:advent:badges"
KEY_STREAK = "christmas:advent:streak"
KEY_AVATAR = "christmas:advent:avatar"

TOTAL_DAYS = 24
PREVIEW_DAY = 1

TILE_LOCKED = "locked"
TILE_OPENED = "opened"
TILE_TODAY = "today"

BADGE_EMOJIS = [
    "🎄", "🎁", "⭐", "❄️", "🎅", "🦌", "🔔", "🕯️", "🌟", "🎀", "⛄", "🎊",
    "🎈", "🎪", "🎭", "🎨", "🎯", "🎲", "🎸", "🎺", "🎻", "🥁", "🎤", "🎬",
]

AVAILABLE_AVATARS = {
    "🎄": "Christmas Tree",
    "🦌": "Reindeer",
    "⛄": "Snowman",
    "🧝": "Elf",
    "🎅": "Santa",
    "🌟": "Star",
}
DEFAULT_AVATAR = "🎄"

# Services
SERVICE_OPEN_DAY = "open_day"
SERVICE_COMPLETE_DAY = "complete_day"
SERVICE_SELECT_AVATAR = "select_avatar"

ATTR_DAY = "day"
ATTR_AVATAR = "avatar"

EVENT_DAY_COMPLETED = f"{DOMAIN}_day_completed"
