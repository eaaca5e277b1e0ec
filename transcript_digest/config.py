"""
Configuration settings for the transcript digest application.
"""

import os
from typing import Dict, Any
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Transcript Digest"
    APP_VERSION = "0.1.0"

    # Input read by the command line tool when no path is given
    DEFAULT_TRANSCRIPT_FILE = os.getenv("TRANSCRIPT_FILE", "transcript.txt")

    # Upper bound on input size, in characters; 0 disables the cap
    MAX_INPUT_CHARS = os.getenv("MAX_INPUT_CHARS", "5000000")

    # Output sizes; raw strings, validated by SummarizerConfig
    KEYWORD_COUNT = os.getenv("KEYWORD_COUNT", "8")
    TAKEAWAY_COUNT = os.getenv("TAKEAWAY_COUNT", "5")

    # Optional directory for a log file, stderr only when unset
    LOG_DIR = os.getenv("LOG_DIR")

    @classmethod
    def get_settings(cls) -> Dict[str, Any]:
        """Get the summarizer related settings."""
        return {
            "max_input_chars": cls.MAX_INPUT_CHARS,
            "keyword_count": cls.KEYWORD_COUNT,
            "takeaway_count": cls.TAKEAWAY_COUNT,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
