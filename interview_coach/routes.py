import logging
import random
from typing import Dict, List

from flask import Blueprint, current_app, jsonify, request, session

from .ai import evaluate
from .questions import category_for_channel, find_question, voice_questions

bp = Blueprint("main", __name__)

logger = logging.getLogger(__name__)


def _bank() -> Dict[str, List[Dict]]:
    return current_app.extensions["question_bank"]


def _result_json(result):
    return jsonify(result.model_dump(mode="json"))


@bp.route("/health")
def health():
    return jsonify({"status": "ok"})


@bp.route("/categories")
def categories():
    return jsonify({"categories": sorted(_bank().keys())})


@bp.route("/get-question", methods=["POST"])
def get_question():
    body = request.get_json(silent=True) or {}
    channel = body.get("category")

    if not channel or channel not in _bank():
        return jsonify({"error": "Invalid category."}), 400

    candidates = voice_questions(_bank(), channel)
    if not candidates:
        return jsonify({"error": "No voice questions in this category."}), 404

    # Avoid asking the same question twice in a row.
    last_q = session.get("last_question_id")
    if last_q and len(candidates) > 1:
        candidates = [q for q in candidates if q["id"] != last_q] or candidates

    selected = random.choice(candidates)
    session["last_question_id"] = selected["id"]

    return jsonify({
        "question_id": selected["id"],
        "question": selected["question"],
        "channel": channel,
        "key_terms": len(selected["voice_keywords"]),
    })


@bp.route("/submit-answer", methods=["POST"])
def submit_answer():
    data = request.get_json(silent=True) or {}
    question_id = data.get("question_id")
    answer = data.get("answer")

    if not question_id or answer is None:
        return jsonify({"error": "Missing question_id or answer."}), 400

    question = find_question(_bank(), question_id)
    if question is None:
        return jsonify({"error": "Unknown question."}), 404

    try:
        result = evaluate(
            str(answer),
            question.get("answer", ""),
            question.get("voice_keywords"),
            category_for_channel(question["channel"]),
        )
        return _result_json(result)
    except Exception as e:
        logger.exception("Evaluation failure: %s", e)
        return jsonify({"error": "Evaluation service failed."}), 500


@bp.route("/evaluate", methods=["POST"])
def evaluate_answer():
    data = request.get_json(silent=True) or {}
    user_answer = data.get("user_answer")
    ideal_answer = data.get("ideal_answer")

    if user_answer is None or ideal_answer is None:
        return jsonify({"error": "user_answer and ideal_answer are required."}), 400

    required = data.get("required_concepts")
    if required is not None and not (
        isinstance(required, list) and all(isinstance(c, str) for c in required)
    ):
        return jsonify({"error": "required_concepts must be a list of strings."}), 400

    try:
        result = evaluate(str(user_answer), str(ideal_answer), required, data.get("question_category"))
        return _result_json(result)
    except Exception as e:
        logger.exception("Evaluation failure: %s", e)
        return jsonify({"error": "Evaluation service failed."}), 500
