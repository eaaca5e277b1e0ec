"""
Module for splitting transcript text into candidate sentences.
"""

import re
from typing import List

from transcript_digest.models.schemas import Sentence, SummarizerConfig, DEFAULT_CONFIG

NEWLINES_RE = re.compile(r'\n+')
# The whitespace after a terminator is the split point; "Mr." splits too
SENTENCE_END_RE = re.compile(r'(?<=[.!?])\s+')


def split_sentences(text: str) -> List[str]:
    """Split text into trimmed pieces at sentence terminators, keeping empty ones."""
    flattened = NEWLINES_RE.sub(' ', text)
    return [piece.strip() for piece in SENTENCE_END_RE.split(flattened)]


def segment(text: str, config: SummarizerConfig = DEFAULT_CONFIG) -> List[Sentence]:
    """
    Segment text into sentences.

    Pieces no longer than ``config.min_sentence_length`` are dropped rather
    than merged into a neighbour. A trailing fragment without a terminator is
    kept if it is long enough.

    Args:
        text: Raw transcript text
        config: Pipeline configuration

    Returns:
        Sentences in input order, indexed from 0
    """
    pieces = [p for p in split_sentences(text) if len(p) > config.min_sentence_length]
    return [Sentence(text=piece, index=i) for i, piece in enumerate(pieces)]
