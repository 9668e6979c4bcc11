from enum import Enum
from typing import Literal

from pydantic import BaseModel


class Level(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


# labels sent back on the wire by POST /avaliar
LEVEL_LABELS = {
    Level.LOW: "baixo",
    Level.MODERATE: "moderado",
    Level.HIGH: "alto",
}


class ScoreResult(BaseModel):
    score: int
    level: Level


class EvaluationResponse(BaseModel):
    pontuacao: int
    nivel: Literal["baixo", "moderado", "alto"]
