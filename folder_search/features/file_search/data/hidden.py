import logging
import os
import stat
from pathlib import Path
from typing import Optional
from ..domain.interfaces import IHiddenDetector

logger = logging.getLogger(__name__)

class AttributeHiddenDetector(IHiddenDetector):
    """
    Reads the platform's notion of "hidden":
    - POSIX: a leading dot in the entry name.
    - Windows: FILE_ATTRIBUTE_HIDDEN in st_file_attributes. A leading dot
      means nothing there, so the dot rule is off by default on Windows.
    - macOS/BSD: UF_HIDDEN in st_flags.
    """

    def __init__(self, dotfiles_hidden: Optional[bool] = None):
        self.dotfiles_hidden = os.name != "nt" if dotfiles_hidden is None else dotfiles_hidden

    def is_hidden(self, path: Path) -> bool:
        path = Path(path)

        # 1. Dotfiles are hidden by convention, no metadata needed
        if self.dotfiles_hidden and path.name.startswith("."):
            return True

        # 2. Attribute bits (failures count as "not hidden")
        try:
            info = os.lstat(path)
        except OSError as e:
            logger.debug(f"Could not read attributes of {path}: {e}")
            return False

        attributes = getattr(info, "st_file_attributes", 0)
        if attributes & stat.FILE_ATTRIBUTE_HIDDEN:
            return True

        flags = getattr(info, "st_flags", 0)
        return bool(flags & stat.UF_HIDDEN)
