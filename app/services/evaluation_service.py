import logging

from app.models.response_models import LEVEL_LABELS
from app.utils.scoring import evaluate

logger = logging.getLogger(__name__)


def compute_evaluation(answers):
    answers = list(answers or [])
    result = evaluate(answers)
    nivel = LEVEL_LABELS[result.level]

    logger.info("Evaluated %d answers: score=%d level=%s", len(answers), result.score, nivel)

    return result.score, nivel
