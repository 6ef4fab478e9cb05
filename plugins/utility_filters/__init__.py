"""
Utility Filters Plugin for Pelican

Registers the json, md5 and sha1 Jinja2 filters with the template
environment of every Pelican generator.

Usage:
    Add 'utility_filters' to PLUGINS in pelicanconf.py. Individual filters
    can be switched off through the UTILITY_FILTERS setting.
"""

import logging

from pelican import signals

from .filters import get_filters
from .settings import UtilityFiltersSettings

_log = logging.getLogger(__name__)


def add_filters(generator):
    """
    Add the enabled utility filters to a generator's Jinja environment.

    Generators without a Jinja environment are left alone.

    Args:
        generator: The Pelican generator sending generator_init
    """
    env = getattr(generator, "env", None)
    if env is None or not hasattr(env, "filters"):
        _log.debug(f"No Jinja environment on {type(generator).__name__}, skipping")
        return

    config = UtilityFiltersSettings.from_pelican(getattr(generator, "settings", None))
    filters = get_filters()
    enabled = config.enabled_filters(filters)

    env.filters.update({name: filters[name] for name in enabled})
    _log.info(f"Registered filters for {type(generator).__name__}: {', '.join(enabled) or 'none'}")


def register():
    """Plugin registration - required by Pelican."""
    signals.generator_init.connect(add_filters)
