import json
import os

import httpx
from pydantic import ValidationError

from config import Settings
from models import TranslationResult, TranslationResponse
from utils import logging
from .errors import (
    ConfigurationError,
    MissingWordError,
    PayloadParseError,
    UpstreamShapeError,
    UpstreamTransportError,
)

PROMPT_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "resources", "prompts")

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "germanWord": {"type": "STRING", "description": "The exact German word entered, including article if applicable."},
        "englishTranslation": {"type": "STRING", "description": "The primary, most accurate English translation."},
        "details": {"type": "STRING", "description": "German grammar details (e.g., gender, plural, verb forms). Include the plural form in parentheses for nouns."},
    },
    "required": ["germanWord", "englishTranslation", "details"],
}


def load_prompt_template(name: str) -> str:
    template_path = os.path.join(PROMPT_DIR, f"{name}.txt")
    try:
        with open(template_path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except FileNotFoundError as e:
        logging.error(f"Error loading prompt template from {template_path}: {str(e)}")
        raise


def build_payload(word: str) -> dict:
    system_prompt = load_prompt_template("translate_word_system")
    user_query = load_prompt_template("translate_word").format(word=word)
    return {
        "contents": [{"parts": [{"text": user_query}]}],
        "systemInstruction": {"parts": [{"text": system_prompt}]},
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA,
        },
    }


async def call_gemini(client: httpx.AsyncClient, settings: Settings, payload: dict) -> dict:
    logging.info(f"Calling Gemini model {settings.model}")
    try:
        response = await client.post(
            settings.generate_content_url,
            params={"key": settings.api_key},
            json=payload,
            timeout=settings.timeout_seconds,
        )
    except httpx.RequestError as e:
        logging.error(f"Gemini API transport error: {type(e).__name__}: {str(e)}")
        raise UpstreamTransportError(502, str(e) or type(e).__name__) from e

    if not response.is_success:
        logging.error(f"Gemini API error: {response.status_code} {response.text}")
        raise UpstreamTransportError(response.status_code, response.text)

    try:
        result = response.json()
    except ValueError as e:
        logging.error(f"Gemini API returned a non-JSON body: {response.text}")
        raise UpstreamShapeError() from e

    logging.debug(f"Received response from Gemini: {result}")
    return result


def _first(value):
    if isinstance(value, list) and value:
        return value[0]
    return None


def _field(value, key):
    if isinstance(value, dict):
        return value.get(key)
    return None


def extract_generated_text(result: dict) -> str:
    # candidates[0].content.parts[0].text, stopping at the first missing link
    candidate = _first(_field(result, "candidates"))
    if candidate is None:
        logging.error(f"Invalid Gemini response structure, no candidate: {result}")
        raise UpstreamShapeError()

    content = _field(candidate, "content")
    if content is None:
        logging.error(f"Invalid Gemini response structure, no content: {result}")
        raise UpstreamShapeError()

    part = _first(_field(content, "parts"))
    if part is None:
        logging.error(f"Invalid Gemini response structure, no parts: {result}")
        raise UpstreamShapeError()

    text = _field(part, "text")
    if not isinstance(text, str) or not text:
        logging.error(f"Invalid Gemini response structure, no text: {result}")
        raise UpstreamShapeError()

    return text


def parse_translation(text: str) -> TranslationResult:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        logging.error(f"Error parsing JSON from Gemini: {str(e)} Raw text: {text}")
        raise PayloadParseError(text) from e

    if not isinstance(parsed, dict):
        logging.error(f"Gemini output is not a JSON object: {text}")
        raise PayloadParseError(text, "Gemini output does not match the translation schema")

    try:
        return TranslationResult(**parsed)
    except ValidationError as e:
        logging.error(f"Gemini output does not match the translation schema: {str(e)} Raw text: {text}")
        raise PayloadParseError(text, "Gemini output does not match the translation schema") from e


async def translate_word(word, settings: Settings, client: httpx.AsyncClient) -> TranslationResponse:
    if not isinstance(word, str) or not word.strip():
        raise MissingWordError()

    logging.info(f"Received word to translate: {word}")

    payload = build_payload(word)

    if not settings.api_key:
        logging.error("GEMINI_API_KEY is missing, refusing to call Gemini")
        raise ConfigurationError()

    result = await call_gemini(client, settings, payload)
    text = extract_generated_text(result)
    translation = parse_translation(text)

    logging.info(f"Translated {translation.germanWord} as {translation.englishTranslation}")
    return translation.to_response()
