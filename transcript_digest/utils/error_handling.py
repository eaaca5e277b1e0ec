"""
Centralized error handling for the application.
"""

import json
from typing import Dict, Any

from transcript_digest.config import config
from transcript_digest.utils.logger import logging


class SummarizerError(Exception):
    """Base class for errors raised by the summarization pipeline."""


class EmptyInputError(SummarizerError, ValueError):
    """The input text is empty or whitespace only."""

    def __init__(self, message: str = "Transcript text is empty"):
        super().__init__(message)


class InputTooLargeError(SummarizerError, ValueError):
    """The input text is longer than the configured size cap."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Transcript is {length} characters long, the limit is {limit}"
        )


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
