import re
from ..domain.errors import InvalidPatternError
from ..domain.interfaces import IPatternMatcher
from ..domain.models import SearchOptions

def glob_to_regex(glob: str) -> str:
    """
    Translates a '*' / '?' glob into an (unanchored) regex body.
    Every other character, '[' and ']' included, is matched literally.
    """
    escaped = re.escape(glob)
    return escaped.replace(r"\*", ".*").replace(r"\?", ".")

class GlobPattern(IPatternMatcher):
    """
    Wildcard match against the whole file name.
    """
    def __init__(self, glob: str, ignore_case: bool = True):
        self.glob = glob
        flags = re.DOTALL | (re.IGNORECASE if ignore_case else 0)
        self._regex = re.compile(glob_to_regex(glob), flags)

    def matches(self, file_name: str) -> bool:
        return self._regex.fullmatch(file_name) is not None

    def __repr__(self) -> str:
        return f"GlobPattern({self.glob!r})"

class RegexPattern(IPatternMatcher):
    """
    Regular expression searched anywhere in the file name.
    Not anchored: '\\d+' matches 'file123.log'.
    """
    def __init__(self, expression: str, ignore_case: bool = True):
        self.expression = expression
        flags = re.IGNORECASE if ignore_case else 0
        try:
            self._regex = re.compile(expression, flags)
        except re.error as e:
            raise InvalidPatternError(expression, str(e)) from e

    def matches(self, file_name: str) -> bool:
        return self._regex.search(file_name) is not None

    def __repr__(self) -> str:
        return f"RegexPattern({self.expression!r})"

def build_matcher(options: SearchOptions) -> IPatternMatcher:
    """
    Picks the matcher variant once per traversal.
    """
    if options.use_regex:
        return RegexPattern(options.pattern, options.ignore_case)
    return GlobPattern(options.pattern, options.ignore_case)
