# -*- coding: utf-8 -*-
"""Text generation service (OpenAI-compatible chat completions).

Coach tips, motivational messages, chat replies, meal suggestions and generated recipes or
workout plans all go through `generate_text`; callers own their fallbacks.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import settings
from .errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert fitness trainer and nutritionist. Provide helpful, accurate, "
    "and motivating advice. Keep responses concise and actionable."
)


def resolve_agent_settings() -> Dict[str, Any]:
    if not settings.llm_api_key:
        raise UpstreamUnavailableError("PULSEFIT_LLM_API_KEY not set")
    return {
        "model": settings.llm_model,
        "base_url": settings.llm_base_url,
        "api_key": settings.llm_api_key,
        "timeout": settings.llm_timeout,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
    }


def call_agent(messages: List[Dict[str, str]]) -> Dict[str, Any]:
    cfg = resolve_agent_settings()
    base_url = cfg["base_url"].rstrip("/")
    if base_url.endswith("/chat/completions"):
        url = base_url
    else:
        url = f"{base_url}/chat/completions"
    payload = {
        "model": cfg["model"],
        "messages": messages,
        "temperature": cfg["temperature"],
        "max_tokens": cfg["max_tokens"],
    }
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {cfg['api_key']}",
    }
    try:
        with httpx.Client(timeout=cfg["timeout"], follow_redirects=True) as client:
            resp = client.post(url, headers=headers, json=payload)
            resp.raise_for_status()
            return resp.json()
    except httpx.HTTPStatusError as exc:
        raise UpstreamUnavailableError(f"Agent API error: {exc.response.status_code}") from exc
    except httpx.RequestError as exc:
        raise UpstreamUnavailableError(f"Agent API unreachable: {exc}") from exc
    except ValueError as exc:
        raise UpstreamUnavailableError(f"Agent API returned non-JSON response: {exc}") from exc


def generate_text(prompt: str, context: Optional[Dict[str, Any]] = None) -> str:
    """
    Single-shot generation.

    Raises UpstreamUnavailableError on any failure, including an empty answer.
    """
    messages: List[Dict[str, str]] = [{"role": "system", "content": SYSTEM_PROMPT}]
    if context:
        context_str = json.dumps(context, ensure_ascii=False, default=str)
        user_content = f"Context (JSON):\n{context_str}\n\n{prompt}"
    else:
        user_content = prompt
    messages.append({"role": "user", "content": user_content})

    result = call_agent(messages)
    try:
        answer = result["choices"][0]["message"]["content"] or ""
    except (KeyError, IndexError, TypeError) as exc:
        raise UpstreamUnavailableError("Agent API returned an unexpected payload") from exc
    answer = answer.strip()
    if not answer:
        raise UpstreamUnavailableError("Agent API returned an empty answer")
    return answer


def generate_with_fallback(
    prompt: str,
    context: Optional[Dict[str, Any]] = None,
    fallback: Optional[str] = None,
) -> Optional[str]:
    """`generate_text`, or `fallback` (None by default) when the service is unavailable."""
    try:
        return generate_text(prompt, context)
    except UpstreamUnavailableError as exc:
        logger.warning("Text generation unavailable, using fallback: %s", exc.message)
        return fallback
