"""LLM providers for the BZR assistant.

Gemini is the primary provider. Anthropic (official SDK) and OpenRouter are
used when Gemini is not configured. Every provider raises LLMError on failure.
"""

from __future__ import annotations

import anthropic
import httpx
from loguru import logger

from bzr import config
from bzr.models import ChatMessage

GEMINI_SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
]


class LLMError(RuntimeError):
    """Raised when an LLM provider cannot produce an answer."""


def _system_text(messages: list[ChatMessage]) -> str:
    return "\n\n".join(m.content for m in messages if m.role == "system")


def last_user_message(messages: list[ChatMessage]) -> str:
    user_messages = [m.content for m in messages if m.role == "user"]
    return user_messages[-1] if user_messages else ""


def build_gemini_prompt(messages: list[ChatMessage]) -> str:
    """Gemini gets one flat prompt: system text + last user question."""
    system = next((m.content for m in messages if m.role == "system"), "")
    return f"{system}\n\n{last_user_message(messages)}"


def parse_gemini_response(data: dict) -> str:
    """Extract answer text from a generateContent response."""
    if not data:
        raise LLMError("Empty response from Gemini API")

    feedback = data.get("promptFeedback") or {}
    if feedback.get("blockReason"):
        raise LLMError(f"Gemini blocked the prompt: {feedback['blockReason']}")

    candidates = data.get("candidates") or []
    if not candidates:
        raise LLMError("No candidates in Gemini response")

    candidate = candidates[0]
    if candidate.get("finishReason") == "SAFETY":
        raise LLMError("Gemini blocked the answer for safety reasons")

    parts = (candidate.get("content") or {}).get("parts") or []
    if not parts:
        raise LLMError("Incomplete Gemini response")

    text = parts[0].get("text")
    if not text:
        raise LLMError("No text in Gemini response")
    return text


async def gemini_complete(
    messages: list[ChatMessage],
    client: httpx.AsyncClient | None = None,
) -> str:
    if not config.GEMINI_API_KEY:
        raise LLMError("GEMINI_API_KEY not set")

    prompt = build_gemini_prompt(messages)
    logger.debug("Gemini prompt length: {} chars", len(prompt))
    payload = {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": config.LLM_TEMPERATURE,
            "maxOutputTokens": config.LLM_MAX_TOKENS,
            "topP": 0.95,
        },
        "safetySettings": GEMINI_SAFETY_SETTINGS,
    }
    url = config.GEMINI_URL.format(model=config.GEMINI_MODEL)

    try:
        async with client or httpx.AsyncClient(timeout=config.LLM_TIMEOUT) as http:
            resp = await http.post(url, params={"key": config.GEMINI_API_KEY}, json=payload)
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPStatusError as e:
        logger.error("Gemini API HTTP {}: {}", e.response.status_code, e.response.text[:300])
        raise LLMError(f"Gemini request failed ({e.response.status_code})") from e
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Gemini API error: {}", e)
        raise LLMError("Gemini request failed") from e

    text = parse_gemini_response(data)
    logger.debug("Gemini answered, {} chars", len(text))
    return text


async def anthropic_complete(messages: list[ChatMessage]) -> str:
    if not config.ANTHROPIC_API_KEY:
        raise LLMError("ANTHROPIC_API_KEY not set")

    client = anthropic.AsyncAnthropic(api_key=config.ANTHROPIC_API_KEY)
    kwargs = {}
    system = _system_text(messages)
    if system:
        kwargs["system"] = system

    try:
        message = await client.messages.create(
            model=config.ANTHROPIC_MODEL,
            max_tokens=config.LLM_MAX_TOKENS,
            messages=[
                {"role": m.role, "content": m.content}
                for m in messages
                if m.role != "system"
            ],
            **kwargs,
        )
        return message.content[0].text.strip()
    except Exception as e:
        logger.error("Claude API error: {}", e)
        raise LLMError("Claude request failed") from e


async def openrouter_complete(
    messages: list[ChatMessage],
    client: httpx.AsyncClient | None = None,
) -> str:
    if not config.OPENROUTER_API_KEY:
        raise LLMError("OPENROUTER_API_KEY not set")

    payload = {
        "model": config.OPENROUTER_MODEL,
        "messages": [m.model_dump() for m in messages],
        "temperature": config.LLM_TEMPERATURE,
        "max_tokens": config.LLM_MAX_TOKENS,
    }
    headers = {"Authorization": f"Bearer {config.OPENROUTER_API_KEY}"}

    try:
        async with client or httpx.AsyncClient(timeout=config.LLM_TIMEOUT) as http:
            resp = await http.post(config.OPENROUTER_URL, json=payload, headers=headers)
        resp.raise_for_status()
        return resp.json()["choices"][0]["message"]["content"]
    except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as e:
        logger.error("OpenRouter API error: {}", e)
        raise LLMError("OpenRouter request failed") from e


_PROVIDERS = {
    "gemini": ("GEMINI_API_KEY", gemini_complete),
    "anthropic": ("ANTHROPIC_API_KEY", anthropic_complete),
    "openrouter": ("OPENROUTER_API_KEY", openrouter_complete),
}


def available_providers() -> list[str]:
    """Configured providers in the order they are tried."""
    return [name for name, (key, _) in _PROVIDERS.items() if getattr(config, key)]


def is_ready() -> bool:
    return bool(available_providers())


async def complete(messages: list[ChatMessage]) -> str:
    """Answer with the first configured provider that succeeds."""
    providers = available_providers()
    if not providers:
        raise LLMError("No LLM API key configured")

    last_error: LLMError | None = None
    for name in providers:
        try:
            return await _PROVIDERS[name][1](messages)
        except LLMError as e:
            logger.warning("LLM provider {} failed: {}", name, e)
            last_error = e
    raise LLMError(f"All LLM providers failed: {last_error}") from last_error
