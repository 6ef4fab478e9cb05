"""
Jinja2 extension exposing the utility filters.

For hosts other than Pelican's plugin system:

    env = Environment(extensions=["utility_filters.extension.UtilityFiltersExtension"])

or in pelicanconf.py:

    JINJA_ENVIRONMENT = {"extensions": ["utility_filters.extension.UtilityFiltersExtension"]}
"""

from jinja2 import Environment
from jinja2.ext import Extension

from .filters import get_filters, get_functions


class UtilityFiltersExtension(Extension):
    """Registers the json, md5 and sha1 filters. Adds no tags."""

    def __init__(self, environment: Environment):
        super().__init__(environment)
        environment.filters.update(get_filters())
        environment.globals.update(get_functions())
