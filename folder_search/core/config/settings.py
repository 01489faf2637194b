# File: folder_search/core/config/settings.py

import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FOLDER_SEARCH_LOG_LEVEL", "INFO").upper()

    # --- Search Defaults ---
    # Used whenever a caller does not pass explicit SearchOptions.
    DEFAULT_PATTERN: str = os.getenv("FOLDER_SEARCH_DEFAULT_PATTERN", "*")
    DEFAULT_MAX_DEPTH: int = int(os.getenv("FOLDER_SEARCH_DEFAULT_MAX_DEPTH", "-1"))
    DEFAULT_USE_REGEX: bool = _env_flag("FOLDER_SEARCH_USE_REGEX", "false")
    DEFAULT_IGNORE_CASE: bool = _env_flag("FOLDER_SEARCH_IGNORE_CASE", "true")
    DEFAULT_INCLUDE_HIDDEN: bool = _env_flag("FOLDER_SEARCH_INCLUDE_HIDDEN", "false")

    def search_defaults(self) -> dict:
        """Returns the configured defaults keyed by SearchOptions field name."""
        return {
            "max_depth": self.DEFAULT_MAX_DEPTH,
            "pattern": self.DEFAULT_PATTERN,
            "use_regex": self.DEFAULT_USE_REGEX,
            "ignore_case": self.DEFAULT_IGNORE_CASE,
            "include_hidden": self.DEFAULT_INCLUDE_HIDDEN,
        }


settings = Settings()
