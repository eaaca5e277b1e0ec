"""
Keyword ranking over the frequency table.
"""

from typing import List, Mapping, Optional, Tuple

from transcript_digest.models.schemas import DEFAULT_CONFIG


def top_keyword_counts(freq: Mapping[str, int], n: Optional[int] = None) -> List[Tuple[str, int]]:
    """
    Most frequent words with their counts.

    The sort is stable over the table's insertion order, so equal counts keep
    the order in which the words first appeared.
    """
    if n is None:
        n = DEFAULT_CONFIG.keyword_count
    return sorted(freq.items(), key=lambda item: item[1], reverse=True)[:n]


def top_keywords(freq: Mapping[str, int], n: Optional[int] = None) -> List[str]:
    """Most frequent words, without their counts."""
    return [word for word, _ in top_keyword_counts(freq, n)]
