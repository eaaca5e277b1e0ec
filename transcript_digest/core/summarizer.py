"""
Module for building extractive digests of transcripts.
"""

from typing import Optional

from transcript_digest.core.frequency import analyze
from transcript_digest.core.keywords import top_keyword_counts
from transcript_digest.core.scorer import score
from transcript_digest.core.segmenter import segment
from transcript_digest.core.selector import select_summary, select_takeaways
from transcript_digest.models.schemas import KeywordCount, SummarizerConfig, TranscriptDigest
from transcript_digest.utils.error_handling import (
    EmptyInputError,
    InputTooLargeError,
    log_diagnostic_info,
)
from transcript_digest.utils.helpers import count_words
from transcript_digest.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, config: Optional[SummarizerConfig] = None):
        """
        Initialize the summarizer.

        Args:
            config: Pipeline configuration (if None, built from the application settings)
        """
        self.config = config or SummarizerConfig.from_app_config()

    def validate(self, text: Optional[str]) -> str:
        """
        Check the input before any processing.

        Args:
            text: Raw transcript text

        Returns:
            The text with surrounding whitespace removed

        Raises:
            EmptyInputError: text is empty or whitespace only
            InputTooLargeError: text is longer than the configured cap
        """
        # str.strip keeps a byte order mark, so drop it explicitly
        stripped = (text or "").strip().lstrip("\ufeff").strip()
        if not stripped:
            raise EmptyInputError()

        limit = self.config.max_input_chars
        if limit and len(stripped) > limit:
            raise InputTooLargeError(len(stripped), limit)
        return stripped

    def summarize(self, text: str, source: Optional[str] = None) -> TranscriptDigest:
        """
        Summarize a transcript text.

        Args:
            text: Full transcript text
            source: Optional label for where the text came from

        Returns:
            TranscriptDigest with summary, keywords and takeaways
        """
        text = self.validate(text)

        sentences = segment(text, self.config)
        freq = analyze(text, self.config)
        scored = score(sentences, freq, self.config)

        summary = select_summary(scored, self.config)
        takeaways = select_takeaways(scored, self.config)
        keyword_counts = top_keyword_counts(freq, self.config.keyword_count)

        word_count = count_words(text)
        logging.info(
            f"Summarized {word_count} words: {len(sentences)} sentences, "
            f"{len(freq)} distinct significant words"
        )
        if not sentences:
            logging.warning("No sentences found, summary and takeaways are empty")

        log_diagnostic_info({
            "source": source,
            "word_count": word_count,
            "sentence_count": len(sentences),
            "distinct_words": len(freq),
            "summary_indexes": [s.index for s in summary],
            "takeaway_scores": [round(s.score, 4) for s in takeaways],
        })

        return TranscriptDigest(
            word_count=word_count,
            sentence_count=len(sentences),
            summary=[s.text for s in summary],
            keywords=[word for word, _ in keyword_counts],
            takeaways=[s.text for s in takeaways],
            keyword_counts=[KeywordCount(word=w, count=c) for w, c in keyword_counts],
            source=source,
        )
