"""
Selection of summary sentences and takeaways from scored sentences.
"""

import math
from typing import List

from transcript_digest.models.schemas import ScoredSentence, SummarizerConfig, DEFAULT_CONFIG
from transcript_digest.utils.helpers import truncate_text


def rank(scored: List[ScoredSentence]) -> List[ScoredSentence]:
    """Return a new list ordered by score, highest first; ties keep input order."""
    return sorted(scored, key=lambda s: s.score, reverse=True)


def summary_count(total: int, config: SummarizerConfig = DEFAULT_CONFIG) -> int:
    """
    Number of sentences in the summary.

    A fraction of the sentence count, clamped to the configured bounds and
    never more than the sentences available.
    """
    wanted = math.floor(total * config.summary_ratio)
    wanted = min(max(config.summary_min, wanted), config.summary_max)
    return min(total, wanted)


def select_summary(
    scored: List[ScoredSentence],
    config: SummarizerConfig = DEFAULT_CONFIG,
) -> List[ScoredSentence]:
    """Pick the best sentences and put them back in reading order."""
    top = rank(scored)[:summary_count(len(scored), config)]
    return sorted(top, key=lambda s: s.index)


def select_takeaways(
    scored: List[ScoredSentence],
    config: SummarizerConfig = DEFAULT_CONFIG,
) -> List[ScoredSentence]:
    """
    Pick the best sentences as standalone takeaways.

    Takeaways stay in score order. Long texts are shortened to
    ``config.takeaway_width`` characters; the score is left untouched.
    """
    top = rank(scored)[:config.takeaway_count]
    return [
        s.model_copy(update={"text": truncate_text(s.text, config.takeaway_width, config.ellipsis)})
        for s in top
    ]
