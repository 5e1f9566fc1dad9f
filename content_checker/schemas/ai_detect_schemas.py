from pydantic import BaseModel
from typing import Any, Literal, Optional


class AIDetectData(BaseModel):
    label: Literal["ai", "human"]
    score: float     # 0–1, probability the text is AI-generated
    raw: Any = None  # classifier output, for display/debugging
    verdict: str


class AIDetectResponse(BaseModel):
    success: bool
    data: Optional[AIDetectData] = None
    error: Optional[str] = None
