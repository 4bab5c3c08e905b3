import os

from google import genai
from google.genai import errors, types

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_TEXT_MODEL = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash")

TUTOR_SYSTEM_PROMPT = (
    "You are an expert tutor. Using only the \"Source text\" provided, answer the "
    "user's \"Question\" clearly and informatively, in the same language as the question. "
    "Base your answer solely on information contained in the source text."
)

QUESTION_USER_PROMPT = "Source text:\n---\n{source_text}\n---\nQuestion: {question}"

NO_ANSWER = "Sorry, I could not find an answer right now."


def answer_question(
    source_text: str,
    question: str,
    *,
    api_key: str | None = None,
    model: str | None = None,
) -> str:
    """Ask Gemini to answer ``question`` from ``source_text`` alone.

    Raises ValueError when the key or inputs are missing, or when the API call fails.
    """
    key = api_key or GEMINI_API_KEY
    if not key:
        raise ValueError("GEMINI_API_KEY missing in environment.")
    if not (source_text or "").strip() or not (question or "").strip():
        raise ValueError("source_text and question are required")

    client = genai.Client(api_key=key)
    try:
        response = client.models.generate_content(
            model=(model or GEMINI_TEXT_MODEL).strip(),
            contents=QUESTION_USER_PROMPT.format(source_text=source_text, question=question),
            config=types.GenerateContentConfig(system_instruction=TUTOR_SYSTEM_PROMPT),
        )
    except errors.APIError as e:
        raise ValueError(f"Gemini request failed: {e}") from e

    text = (getattr(response, "text", None) or "").strip()
    return text or NO_ANSWER
