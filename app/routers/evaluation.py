from typing import Optional

from fastapi import APIRouter

from app.models.request_models import EvaluationRequest
from app.models.response_models import EvaluationResponse
from app.services.evaluation_service import compute_evaluation

router = APIRouter()


@router.post("", response_model=EvaluationResponse)
def submit_evaluation(payload: Optional[EvaluationRequest] = None):
    respostas = payload.respostas if payload is not None else []
    pontuacao, nivel = compute_evaluation(respostas)
    return EvaluationResponse(pontuacao=pontuacao, nivel=nivel)
