import asyncio
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from ..domain.interfaces import IDiagnosticSink
from ..domain.models import FileRecord, SearchOptions
from .traversal import TraversalEngine

logger = logging.getLogger(__name__)

class FileSearchService:
    """
    Facade for the File Search Feature.
    Materializes, enriches, or streams what the TraversalEngine produces.
    """
    def __init__(self, engine: Optional[TraversalEngine] = None, sink: Optional[IDiagnosticSink] = None):
        self.engine = engine or TraversalEngine(sink=sink)
        # Record failures go to the same place as traversal problems
        self.sink = sink or self.engine.sink

    def enumerate_files(self, root_path: Path, options: Optional[SearchOptions] = None) -> Iterator[Path]:
        """
        Streams matching paths on demand. Raises RootNotFoundError up front.
        """
        return self.engine.enumerate_files(root_path, options or SearchOptions.from_settings())

    def get_file_paths(self, root_path: Path, options: Optional[SearchOptions] = None) -> List[Path]:
        paths = list(self.enumerate_files(root_path, options))
        logger.debug(f"Found {len(paths)} files under {root_path}")
        return paths

    def get_file_records(self, root_path: Path, options: Optional[SearchOptions] = None) -> List[FileRecord]:
        """
        Like get_file_paths, but with size and timestamp metadata.
        Files whose metadata cannot be read (removed mid-scan, out-of-range
        timestamps) are reported and skipped.
        """
        records: List[FileRecord] = []
        for file_path in self.enumerate_files(root_path, options):
            try:
                records.append(FileRecord.from_path(file_path))
            except (OSError, ValueError, OverflowError) as e:
                self.sink.report(f"Could not build file record for {file_path}", e)
        return records

    async def get_file_paths_async(
        self, root_path: Path, options: Optional[SearchOptions] = None
    ) -> List[Path]:
        """
        Runs get_file_paths on the default executor so the event loop stays free.
        The walk itself is not parallelized and cannot be cancelled once started.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get_file_paths, root_path, options)

# Singleton Instance for easy import
file_search = FileSearchService()

def enumerate_files(root_path: Path, options: Optional[SearchOptions] = None) -> Iterator[Path]:
    return file_search.enumerate_files(root_path, options)

def get_file_paths(root_path: Path, options: Optional[SearchOptions] = None) -> List[Path]:
    return file_search.get_file_paths(root_path, options)

def get_file_records(root_path: Path, options: Optional[SearchOptions] = None) -> List[FileRecord]:
    return file_search.get_file_records(root_path, options)

async def get_file_paths_async(root_path: Path, options: Optional[SearchOptions] = None) -> List[Path]:
    return await file_search.get_file_paths_async(root_path, options)
