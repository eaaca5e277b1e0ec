"""
Word normalization and frequency counting.

The same ``tokenize`` function feeds both the frequency table and sentence
scoring, so the topics list and the selected sentences always agree on what
a word is.
"""

import re
from collections import Counter
from typing import List

from transcript_digest.models.schemas import SummarizerConfig, DEFAULT_CONFIG

NON_WORD_RE = re.compile(r'[^a-z0-9\s]')


def tokenize(text: str) -> List[str]:
    """Lowercase, drop everything but letters, digits and whitespace, then split."""
    return NON_WORD_RE.sub('', text.lower()).split()


def is_significant(word: str, config: SummarizerConfig = DEFAULT_CONFIG) -> bool:
    """A word counts when it is long enough and not a stopword."""
    return len(word) > config.min_word_length and word not in config.stopwords


def analyze(text: str, config: SummarizerConfig = DEFAULT_CONFIG) -> Counter:
    """
    Count significant words over the whole text.

    Args:
        text: Raw transcript text
        config: Pipeline configuration

    Returns:
        Counter keyed by word, in first-seen order
    """
    freq = Counter()
    for word in tokenize(text):
        if is_significant(word, config):
            freq[word] += 1
    return freq
