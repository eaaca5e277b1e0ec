"""
Transcript Digest.

Builds a short extractive summary, a list of key topics and a handful of
takeaways from the plain text of a transcript.
"""

from transcript_digest.config import config

__version__ = config.APP_VERSION
