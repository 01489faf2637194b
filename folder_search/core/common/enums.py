# File: folder_search/core/common/enums.py

from enum import Enum, unique

@unique
class PatternKind(str, Enum):
    GLOB = "glob"
    REGEX = "regex"
