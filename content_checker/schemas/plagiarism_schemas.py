from pydantic import BaseModel, StrictStr
from typing import List, Optional


class TextCheckRequest(BaseModel):
    text: Optional[StrictStr] = None


class ChunkMatch(BaseModel):
    chunkIndex: int
    chunkText: str
    url: str
    title: str
    snippet: str
    similarity: float   # 0–1, two decimals


class PlagiarismData(BaseModel):
    plagiarismScore: float  # mean of per-chunk best similarity
    matches: List[ChunkMatch]
    verdict: str


class PlagiarismResponse(BaseModel):
    success: bool
    data: Optional[PlagiarismData] = None
    error: Optional[str] = None
