import logging
import os

AUTHOR = "Site Author"
SITENAME = "Utility Filters Demo"
SITEURL = ""

PATH = "content"

TIMEZONE = "UTC"

DEFAULT_LANG = "en"

# Logger the plugin writes to
PLUGIN_LOGGER = "utility_filters"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"


def _plugin_level_from_env() -> int:
    level = logging.getLevelName(os.environ.get("UTILITY_FILTERS_LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_file_name: str | None = None,
    file_level: int = logging.INFO,
    console_level: int = logging.INFO,
    plugin_level: int | None = None,
):
    """
    Send build logs to the console, and to log_file_name when given.

    The utility_filters logger gets its own level (UTILITY_FILTERS_LOG_LEVEL
    unless plugin_level is passed) so ignored |json options, logged at DEBUG,
    can be surfaced without debug output from all of Pelican.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [(logging.StreamHandler(), console_level)]
    if log_file_name:
        handlers.append((logging.FileHandler(log_file_name, encoding="utf-8"), file_level))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Handlers do the filtering
    root_logger.handlers.clear()
    for handler, level in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(PLUGIN_LOGGER).setLevel(plugin_level if plugin_level is not None else _plugin_level_from_env())
    return root_logger


# Initialize logging
setup_logging()

# Feed generation is usually not desired when developing
FEED_ALL_ATOM = None
CATEGORY_FEED_ATOM = None
TRANSLATION_FEED_ATOM = None
AUTHOR_FEED_ATOM = None
AUTHOR_FEED_RSS = None

DEFAULT_PAGINATION = 10

# Plugins
PLUGIN_PATHS = ["plugins"]
PLUGINS = [
    "utility_filters",
]

# Set a filter to False to keep it out of the templates
UTILITY_FILTERS = {
    "filters": {
        "json": True,
        "md5": True,
        "sha1": True,
    },
}
