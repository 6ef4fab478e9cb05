"""
Configuration for the utility filters plugin.

Read from the UTILITY_FILTERS Pelican setting:

    UTILITY_FILTERS = {
        "filters": {"json": True, "md5": True, "sha1": False},
    }

Filters left out of the mapping stay enabled.
"""

from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError

from .errors import ConfigurationError

SETTING_NAME = "UTILITY_FILTERS"

FilterName = Literal["json", "md5", "sha1"]


class UtilityFiltersSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    filters: Dict[FilterName, StrictBool] = {}

    @classmethod
    def from_pelican(cls, settings: Optional[Mapping[str, Any]]) -> "UtilityFiltersSettings":
        """
        Build from a Pelican settings mapping.

        Args:
            settings: Pelican settings (generator.settings). May be None.

        Returns:
            Validated plugin settings, defaults when UTILITY_FILTERS is absent

        Raises:
            ConfigurationError: If UTILITY_FILTERS has unknown keys or bad values
        """
        raw = (settings or {}).get(SETTING_NAME) or {}
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {SETTING_NAME} setting: {e}") from e

    def is_enabled(self, name: str) -> bool:
        return self.filters.get(name, True)

    def enabled_filters(self, available: Mapping[str, Any]) -> List[str]:
        return [name for name in available if self.is_enabled(name)]
