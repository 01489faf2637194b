import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ..domain.errors import RootNotFoundError
from ..domain.interfaces import IDiagnosticSink, IFileSystem, IHiddenDetector, IPatternMatcher
from ..domain.models import SearchOptions
from ..data.diagnostics import LoggingDiagnosticSink
from ..data.hidden import AttributeHiddenDetector
from ..data.local_fs import LocalFileSystem
from ..data.pattern_matcher import build_matcher

logger = logging.getLogger(__name__)

class TraversalEngine:
    """
    Lazily enumerates files under a root directory.

    Two strategies sit behind enumerate_files():
    - max_depth == -1: native recursive listing (os.walk), screened for
      hidden entries and the name pattern.
    - max_depth >= 0: a depth-limited walk over an explicit directory stack.
    """

    def __init__(
        self,
        fs: Optional[IFileSystem] = None,
        hidden_detector: Optional[IHiddenDetector] = None,
        sink: Optional[IDiagnosticSink] = None,
    ):
        # In a full DI framework, these would be injected.
        self.fs = fs or LocalFileSystem()
        self.hidden_detector = hidden_detector or AttributeHiddenDetector()
        self.sink = sink or LoggingDiagnosticSink()

    def enumerate_files(self, root_path: Path, options: SearchOptions) -> Iterator[Path]:
        """
        Validates the root and the pattern, then hands back a generator.

        Not a generator itself: a missing root or a bad regex must fail
        here, before the caller receives a single path.
        """
        root = Path(root_path)
        if not self.fs.directory_exists(root):
            raise RootNotFoundError(root)

        matcher = build_matcher(options)
        logger.debug(
            f"Enumerating {root} (depth={options.max_depth}, "
            f"{options.pattern_kind.value}={options.pattern!r})"
        )

        if options.unbounded:
            return self._walk_unbounded(root, matcher, options)
        return self._walk_bounded(root, options.max_depth, matcher, options)

    # --- Strategies ---

    def _walk_unbounded(
        self, root: Path, matcher: IPatternMatcher, options: SearchOptions
    ) -> Iterator[Path]:
        def on_error(error: OSError) -> None:
            self._report_listing_error(Path(error.filename or root), error)

        for dirpath, dirnames, filenames in self.fs.walk(root, on_error):
            # 1. Prune hidden directories in place so os.walk never enters them
            if not options.include_hidden:
                dirnames[:] = [
                    d for d in dirnames
                    if not self.hidden_detector.is_hidden(dirpath / d)
                ]

            # 2. Screen files (the native listing knows neither regex nor hidden)
            for filename in filenames:
                file_path = dirpath / filename
                if self._accepts(file_path, matcher, options):
                    yield file_path

    def _walk_bounded(
        self,
        root: Path,
        max_depth: int,
        matcher: IPatternMatcher,
        options: SearchOptions,
    ) -> Iterator[Path]:
        # Explicit stack of (directory, depth_remaining) frames, so tree depth
        # is not bounded by the interpreter's recursion limit.
        # Children are pushed in reverse to keep name-ordered depth-first output.
        stack: List[Tuple[Path, int]] = [(root, max_depth)]

        while stack:
            directory, depth_remaining = stack.pop()

            # 1. Files of this directory (unreadable means empty, children included)
            try:
                files = self.fs.list_files(directory)
            except OSError as e:
                self._report_listing_error(directory, e)
                continue

            for file_path in files:
                if self._accepts(file_path, matcher, options):
                    yield file_path

            # 2. Descend while budget remains
            if depth_remaining <= 0:
                continue

            try:
                subdirs = self.fs.list_directories(directory)
            except OSError as e:
                self._report_listing_error(directory, e)
                continue

            for subdir in reversed(subdirs):
                if not options.include_hidden and self.hidden_detector.is_hidden(subdir):
                    continue
                stack.append((subdir, depth_remaining - 1))

    # --- Helpers ---

    def _accepts(self, file_path: Path, matcher: IPatternMatcher, options: SearchOptions) -> bool:
        if not options.include_hidden and self.hidden_detector.is_hidden(file_path):
            return False
        return matcher.matches(file_path.name)

    def _report_listing_error(self, directory: Path, error: OSError) -> None:
        if isinstance(error, PermissionError):
            self.sink.report(f"Access denied to directory {directory}", error)
        else:
            self.sink.report(f"Failed to read directory {directory}", error)
