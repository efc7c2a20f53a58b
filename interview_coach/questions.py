import json
import logging
from typing import Dict, List, Optional

from .ai.models import QuestionCategory

logger = logging.getLogger(__name__)

QuestionBank = Dict[str, List[Dict]]

BEHAVIORAL_CHANNELS = {"behavioral", "engineering-management"}


class QuestionBankError(RuntimeError):
    pass


def load_questions(path: str) -> QuestionBank:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise QuestionBankError(f"Could not load question bank from {path}: {e}") from e

    if not isinstance(data, dict):
        raise QuestionBankError(f"Question bank at {path} must map channels to question lists")
    logger.info("Loaded %d questions across %d channels", sum(len(v) for v in data.values()), len(data))
    return data


def find_question(bank: QuestionBank, question_id: str) -> Optional[Dict]:
    for channel, questions in bank.items():
        for q in questions:
            if q.get("id") == question_id:
                return dict(q, channel=channel)
    return None


def voice_questions(bank: QuestionBank, channel: str) -> List[Dict]:
    """Questions in ``channel`` that carry key terms for spoken answers."""
    return [dict(q, channel=channel) for q in bank.get(channel, []) if q.get("voice_keywords")]


def category_for_channel(channel: str) -> QuestionCategory:
    if channel in BEHAVIORAL_CHANNELS:
        return QuestionCategory.BEHAVIORAL
    if channel == "system-design":
        return QuestionCategory.SYSTEM_DESIGN
    return QuestionCategory.TECHNICAL
