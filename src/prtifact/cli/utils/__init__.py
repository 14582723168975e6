"""CLI utilities package."""

from typing import Optional
from ...utils.errors import ReportDeliveryError


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.

    Args:
        message: Error message
        suggestion: Optional suggestion or help text

    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def format_delivery_error(error: ReportDeliveryError) -> str:
    """One line per failed task, under a summary line."""
    lines = [format_error(f"{len(error.errors)} delivery task(s) failed")]
    for underlying in error.errors:
        lines.append(f"  - {type(underlying).__name__}: {underlying}")
    return "\n".join(lines)
