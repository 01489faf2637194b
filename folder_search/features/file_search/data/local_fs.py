import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple
from ..domain.interfaces import IFileSystem

class LocalFileSystem(IFileSystem):
    """
    Concrete implementation using os.scandir and os.walk.
    Entries come back sorted by name so results are deterministic.
    Symlinked directories are never descended, matching os.walk's default.
    """

    def directory_exists(self, path: Path) -> bool:
        return Path(path).is_dir()

    def walk(
        self,
        root: Path,
        on_error: Optional[Callable[[OSError], None]] = None,
    ) -> Iterator[Tuple[Path, List[str], List[str]]]:
        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            # Sort in place: os.walk reads this same list to decide where to descend
            dirnames.sort()
            files = sorted(
                name for name in filenames
                if os.path.isfile(os.path.join(dirpath, name))
            )
            yield Path(dirpath), dirnames, files

    def list_files(self, directory: Path) -> List[Path]:
        # Materialize inside the context so listing errors surface here
        with os.scandir(directory) as entries:
            files = [Path(entry.path) for entry in entries if self._is_file(entry)]
        return sorted(files, key=lambda p: p.name)

    def list_directories(self, directory: Path) -> List[Path]:
        with os.scandir(directory) as entries:
            dirs = [Path(entry.path) for entry in entries if self._is_dir(entry)]
        return sorted(dirs, key=lambda p: p.name)

    @staticmethod
    def _is_file(entry: os.DirEntry) -> bool:
        try:
            return entry.is_file()
        except OSError:
            return False

    @staticmethod
    def _is_dir(entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError:
            return False
