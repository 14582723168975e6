"""Pass-through processor: the report is a file's content or a literal string."""

import errno
from pathlib import Path
from typing import Any, Sequence
from ..destinations.base import ReportProcessor
from ..utils.logging import get_logger

logger = get_logger("processors.text")


def get_content(source: str) -> str:
    """
    Read ``source`` as a UTF-8 file, or return it unchanged when it cannot name a file.

    Other read errors (permissions, directories) propagate.
    """
    try:
        return Path(source).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("Unable to load file. Treating report source as literal text.")
        return source
    except ValueError:
        # Embedded NUL
        return source
    except OSError as e:
        if e.errno == errno.ENAMETOOLONG:
            return source
        raise


class TextReportProcessor(ReportProcessor[str]):
    """Produces the same text for every run; the artifacts are ignored."""

    uses_artifacts = False

    def __init__(self, source: str):
        """
        Args:
            source: Path to a report file, or the report text itself
        """
        self.source = source

    def generate_report(self, artifacts: Sequence[Any]) -> str:
        return get_content(self.source)
