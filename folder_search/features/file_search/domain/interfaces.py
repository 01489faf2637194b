from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

class IFileSystem(ABC):
    """
    Contract for read-only directory queries.
    Abstracts os.walk vs os.scandir so tests can inject failures.
    """
    @abstractmethod
    def directory_exists(self, path: Path) -> bool:
        pass

    @abstractmethod
    def walk(
        self,
        root: Path,
        on_error: Optional[Callable[[OSError], None]] = None,
    ) -> Iterator[Tuple[Path, List[str], List[str]]]:
        """
        Native recursive listing, yielding (dirpath, dirnames, filenames).
        Callers may prune dirnames in place to skip subtrees.
        """
        pass

    @abstractmethod
    def list_files(self, directory: Path) -> List[Path]:
        """Immediate regular files of a directory. May raise OSError."""
        pass

    @abstractmethod
    def list_directories(self, directory: Path) -> List[Path]:
        """Immediate subdirectories of a directory. May raise OSError."""
        pass

class IHiddenDetector(ABC):
    @abstractmethod
    def is_hidden(self, path: Path) -> bool:
        """
        True if the platform flags the entry as hidden.
        Must return False instead of raising when metadata is unavailable.
        """
        pass

class IPatternMatcher(ABC):
    @abstractmethod
    def matches(self, file_name: str) -> bool:
        """Tests a base file name (not a full path) against the pattern."""
        pass

class IDiagnosticSink(ABC):
    @abstractmethod
    def report(self, context: str, error: Exception) -> None:
        """Receives a non-fatal problem encountered during traversal."""
        pass
