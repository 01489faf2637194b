from pathlib import Path


class RootNotFoundError(FileNotFoundError):
    """
    Raised when the search root does not exist or is not a directory.
    """
    def __init__(self, root_path: Path):
        self.root_path = Path(root_path)
        super().__init__(f"Search root not found: {self.root_path}")


class InvalidPatternError(ValueError):
    """
    Raised when a regular expression pattern fails to compile.
    """
    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
