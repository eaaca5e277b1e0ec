"""
Data models for the transcript digest application.
"""
import time
from typing import FrozenSet, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from transcript_digest.config import config
from transcript_digest.core.stopwords import DEFAULT_STOPWORDS


class SummarizerConfig(BaseModel):
    """Tunable constants of the summarization pipeline.

    Instances are immutable and are passed to every pipeline stage, so a
    run never depends on module level state.
    """
    model_config = ConfigDict(frozen=True)

    stopwords: FrozenSet[str] = DEFAULT_STOPWORDS
    # Sentences and words must be strictly longer than these
    min_sentence_length: int = Field(20, ge=0)
    min_word_length: int = Field(2, ge=0)
    # Position boost: score *= 1 + position_boost / (1 + index * position_decay)
    position_boost: float = Field(0.2, ge=0)
    position_decay: float = Field(0.1, ge=0)
    summary_ratio: float = Field(0.1, ge=0)
    summary_min: int = Field(3, ge=0)
    summary_max: int = Field(10, ge=0)
    takeaway_count: int = Field(5, ge=0)
    takeaway_width: int = Field(120, ge=1)
    ellipsis: str = "..."
    keyword_count: int = Field(8, ge=0)
    max_input_chars: int = Field(5_000_000, ge=0)

    @field_validator('stopwords', mode='before')
    def normalize_stopwords(cls, v):
        return frozenset(word.lower() for word in v)

    @model_validator(mode='after')
    def check_bounds(self):
        if self.summary_min > self.summary_max:
            raise ValueError('summary_min must not exceed summary_max')
        if len(self.ellipsis) >= self.takeaway_width:
            raise ValueError('ellipsis must be shorter than takeaway_width')
        return self

    @classmethod
    def from_app_config(cls, app_config=config, **overrides) -> "SummarizerConfig":
        """Build a pipeline configuration from the application settings."""
        settings = app_config.get_settings()
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**settings)


DEFAULT_CONFIG = SummarizerConfig()


class Sentence(BaseModel):
    """A candidate sentence and its position among the kept sentences."""
    model_config = ConfigDict(frozen=True)

    text: str
    index: int = Field(ge=0)


class ScoredSentence(BaseModel):
    """A sentence with its final score."""
    model_config = ConfigDict(frozen=True)

    text: str
    score: float
    index: int = Field(ge=0)


class KeywordCount(BaseModel):
    """A keyword and the number of times it occurs."""
    word: str
    count: int


class TranscriptDigest(BaseModel):
    """Model for storing the digest of one transcript."""
    word_count: int
    sentence_count: int
    summary: List[str] = []
    keywords: List[str] = []
    takeaways: List[str] = []
    keyword_counts: List[KeywordCount] = []
    source: Optional[str] = None
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
