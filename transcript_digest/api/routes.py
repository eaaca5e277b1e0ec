"""
API routes for the Transcript Digest application.
"""

from fastapi import APIRouter, HTTPException

from transcript_digest.api.schems import SummarizeRequest
from transcript_digest.core.summarizer import TranscriptSummarizer
from transcript_digest.models.schemas import SummarizerConfig, TranscriptDigest
from transcript_digest.utils.error_handling import EmptyInputError, InputTooLargeError
from transcript_digest.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["transcripts"])


@router.post("/summarize", response_model=TranscriptDigest)
def summarize_transcript(request: SummarizeRequest):
    """
    Build the digest of a transcript posted as plain text.

    - 400 if the text is empty
    - 413 if the text exceeds the configured size cap
    """
    summarizer_config = SummarizerConfig.from_app_config(
        keyword_count=request.keyword_count,
        takeaway_count=request.takeaway_count,
    )
    summarizer = TranscriptSummarizer(summarizer_config)

    try:
        return summarizer.summarize(request.text, source="api")
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InputTooLargeError as e:
        logging.warning(f"Rejected transcript: {e}")
        raise HTTPException(status_code=413, detail=str(e))
