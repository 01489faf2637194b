from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from folder_search.core.common.enums import PatternKind
from folder_search.core.config.settings import settings

@dataclass(frozen=True)
class SearchOptions:
    """
    How a single traversal filters and limits its results.

    max_depth: -1 means unlimited, 0 means the root directory only,
    n > 0 descends n levels below the root.
    """
    max_depth: int = -1
    pattern: str = "*"
    use_regex: bool = False
    ignore_case: bool = True
    include_hidden: bool = False

    def __post_init__(self):
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
            raise TypeError(f"max_depth must be an int, got {type(self.max_depth).__name__}")
        if self.max_depth < -1:
            raise ValueError(f"max_depth must be -1 or greater, got {self.max_depth}")
        if not isinstance(self.pattern, str):
            raise TypeError(f"pattern must be a str, got {type(self.pattern).__name__}")

    @property
    def unbounded(self) -> bool:
        return self.max_depth == -1

    @property
    def pattern_kind(self) -> PatternKind:
        return PatternKind.REGEX if self.use_regex else PatternKind.GLOB

    @classmethod
    def from_settings(cls, **overrides) -> "SearchOptions":
        """
        Builds options from the configured defaults, with keyword overrides.
        """
        values = settings.search_defaults()
        values.update(overrides)
        return cls(**values)

@dataclass(frozen=True)
class FileRecord:
    """
    Metadata snapshot of a discovered file.
    """
    path: Path
    name: str
    suffix: str
    size_bytes: int
    modified_at: datetime

    @classmethod
    def from_path(cls, path: Path) -> "FileRecord":
        # Raises OSError if the file vanished or cannot be stat'ed
        stat_result = path.stat()
        return cls(
            path=path,
            name=path.name,
            suffix=path.suffix.lower(),
            size_bytes=stat_result.st_size,
            modified_at=datetime.fromtimestamp(stat_result.st_mtime),
        )
