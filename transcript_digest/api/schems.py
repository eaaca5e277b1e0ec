from pydantic import BaseModel, Field
from typing import Optional


class SummarizeRequest(BaseModel):
    """Model for requesting a transcript digest."""
    text: str
    keyword_count: Optional[int] = Field(None, ge=0)
    takeaway_count: Optional[int] = Field(None, ge=0)
