"""
Sentence scoring against the word frequency table.
"""

from typing import List, Mapping

from transcript_digest.core.frequency import tokenize
from transcript_digest.models.schemas import (
    Sentence,
    ScoredSentence,
    SummarizerConfig,
    DEFAULT_CONFIG,
)


def position_boost(index: int, config: SummarizerConfig = DEFAULT_CONFIG) -> float:
    """
    Multiplier favouring early sentences.

    Introductions of spoken transcripts tend to state the topic. The factor
    starts at ``1 + position_boost`` and decays towards 1; the constants are
    empirical and can be swapped through the configuration.
    """
    return 1 + config.position_boost / (1 + index * config.position_decay)


def score_sentence(
    sentence: Sentence,
    freq: Mapping[str, int],
    config: SummarizerConfig = DEFAULT_CONFIG,
) -> ScoredSentence:
    """Sum the frequency of every token in the sentence, then apply the boost once."""
    # Tokens are not filtered here: short words and stopwords simply add 0
    raw = sum(freq.get(token, 0) for token in tokenize(sentence.text))
    return ScoredSentence(
        text=sentence.text,
        score=raw * position_boost(sentence.index, config),
        index=sentence.index,
    )


def score(
    sentences: List[Sentence],
    freq: Mapping[str, int],
    config: SummarizerConfig = DEFAULT_CONFIG,
) -> List[ScoredSentence]:
    """Score sentences, keeping their input order."""
    return [score_sentence(sentence, freq, config) for sentence in sentences]
