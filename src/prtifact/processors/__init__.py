"""Report processors shipped with prtifact."""

from .text import TextReportProcessor, get_content

__all__ = ["TextReportProcessor", "get_content"]
