"""
Core functionality for the transcript digest application.

This package contains the summarization pipeline: sentence segmentation,
word frequency counting, sentence scoring, selection and keyword ranking.
"""
