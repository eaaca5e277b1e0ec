"""
Configuration for pytest tests.
"""

import os
import pytest

from transcript_digest.models.schemas import ScoredSentence, SummarizerConfig


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["ENVIRONMENT"] = os.environ.get("ENVIRONMENT", "development")
    yield


@pytest.fixture
def summarizer_config():
    """Return a pipeline configuration with the default constants."""
    return SummarizerConfig()


@pytest.fixture
def rust_transcript():
    """Three sentences: heavy, light and no use of the word rust."""
    return (
        "Rust rust rust rust rust is the language we discuss. "
        "Today we also mention rust in passing here. "
        "Nothing else matters much in this final part."
    )


@pytest.fixture
def talk_transcript():
    """A short talk with repeated topics and some filler."""
    return (
        "Welcome back to the channel, today we are talking about sourdough bread.\n"
        "Sourdough bread needs a starter, flour, water and salt.\n\n"
        "Um, yeah. Okay.\n"
        "The starter is a culture of wild yeast and bacteria that lives in flour and water. "
        "Feed the starter every day so the yeast stays active! "
        "Why does the dough need so much time? "
        "Long fermentation gives the bread flavour and makes the crumb open. "
        "Shape the dough gently and let it proof overnight in the fridge. "
        "Bake the bread in a hot dutch oven for forty minutes. "
        "Thanks for watching and happy baking"
    )


@pytest.fixture
def make_scored():
    """Build scored sentences from a list of scores, indexed in order."""
    def _make(scores):
        return [
            ScoredSentence(text=f"Sentence number {i} of the transcript.", score=s, index=i)
            for i, s in enumerate(scores)
        ]
    return _make
