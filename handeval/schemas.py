from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# ---------- Evaluation ----------

class EvaluateRequest(BaseModel):
    hand: str = Field(..., examples=["Jd 10d Ad Qd Kd"])


class EvaluateResponse(BaseModel):
    hand: str  # canonical, sorted tokens
    cards: List[str]
    category: str
    description: str


class BatchEvaluateRequest(BaseModel):
    hands: List[str]


class HandError(BaseModel):
    error: Literal["invalid_card", "invalid_hand"]
    cause: str
    message: str
    token: Optional[str] = None


class BatchEvaluateEntry(BaseModel):
    input: str
    result: Optional[EvaluateResponse] = None
    error: Optional[HandError] = None


class BatchEvaluateResponse(BaseModel):
    results: List[BatchEvaluateEntry]
