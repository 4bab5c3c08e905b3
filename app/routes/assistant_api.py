from flask import Blueprint, current_app, jsonify, request

from ..services.gemini_svc import answer_question

bp = Blueprint("assistant_api", __name__)


# -----------------------------
# AI: study assistant
# -----------------------------
@bp.post("/ask-ai")
def ask_ai():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    source_text = str(payload.get("sourceText") or "").strip()
    question = str(payload.get("question") or "").strip()
    if not source_text or not question:
        return jsonify({"error": "sourceText and question are required"}), 400

    try:
        answer = answer_question(
            source_text,
            question,
            api_key=current_app.config.get("GEMINI_API_KEY"),
            model=current_app.config.get("GEMINI_TEXT_MODEL"),
        )
    except Exception:
        current_app.logger.exception("Error calling Gemini API")
        return jsonify({"error": "Failed to contact the AI service."}), 500
    return jsonify({"answer": answer})
