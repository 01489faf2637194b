import logging
from ..domain.interfaces import IDiagnosticSink

logger = logging.getLogger(__name__)

class LoggingDiagnosticSink(IDiagnosticSink):
    """
    Default sink: forwards traversal problems to the module logger.
    """
    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def report(self, context: str, error: Exception) -> None:
        self.log.warning(f"{context}: {error}")
