"""
LLM call wrapper and it does:
- Sends prompts to the OpenAI chat-completions endpoint
- Requests JSON-object output
- Maps transport / HTTP failures to UpstreamError, missing text to EmptyCompletion

Main purpose:
Central interface for the one model call. No retry:
one upstream failure ends the request.
"""


import json
from typing import AsyncIterator, Optional

import httpx

from shortforge.core.config import settings
from shortforge.core.errors import EmptyCompletion, Unexpected, UpstreamError
from shortforge.core.logging import get_logger

log = get_logger("llm.router")

UPSTREAM_FALLBACK_MESSAGE = "OpenAI request failed"


MOCK_PLAN = {
    "title": "Edit Twice as Fast (Without Looking Rushed)",
    "hook": "You're wasting half your edit on one habit.",
    "summary": "Three workflow changes that cut editing time while keeping the cut polished.",
    "pacing": "Fast cuts every 1-2 seconds, a breath at the midpoint, energy peaks on the final tip.",
    "beats": [
        {"timestamp": "0:00-0:03", "narration": "You're wasting half your edit on one habit.", "visual": "Close-up, timeline scrolling endlessly, caption pops on 'half'."},
        {"timestamp": "0:03-0:15", "narration": "Stop scrubbing. Mark selects while you watch.", "visual": "Screen capture of hotkey markers dropping in real time."},
        {"timestamp": "0:15-0:30", "narration": "Build one template and never start from zero.", "visual": "Split screen: empty project vs. template loading."},
        {"timestamp": "0:30-0:45", "narration": "Follow for the preset pack.", "visual": "Creator points to follow button, logo sting."},
    ],
    "cta": "Follow for the free preset pack.",
    "hashtags": ["#editingtips", "#youtubeshorts", "#contentcreator", "#videoediting", "#workflow"],
    "distributionTips": [
        "Post between 5 and 7pm in your audience's timezone.",
        "Pin a comment asking which tip they'll try first.",
        "Cross-post to Reels with native captions.",
    ],
}


def _safe_snippet(text: str, n: int = 400) -> str:
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


def _timeout() -> httpx.Timeout:
    return httpx.Timeout(settings.LLM_TIMEOUT_SECONDS)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One client per request, closed when the response is sent."""
    async with httpx.AsyncClient(timeout=_timeout()) as client:
        yield client


def _upstream_message(r: httpx.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return UPSTREAM_FALLBACK_MESSAGE
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return UPSTREAM_FALLBACK_MESSAGE


async def _openai_chat(client: httpx.AsyncClient, api_key: str, system: str, user: str) -> str:
    url = f"{settings.OPENAI_BASE_URL.rstrip('/')}/chat/completions"
    headers = {"Authorization": f"Bearer {api_key}"}
    payload = {
        "model": settings.LLM_MODEL,
        "temperature": settings.LLM_TEMPERATURE,
        "max_tokens": settings.LLM_MAX_TOKENS,
        "response_format": {"type": "json_object"},
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
    }

    log.info(f"POST {url} model={settings.LLM_MODEL}")
    try:
        r = await client.post(url, headers=headers, json=payload)
    except httpx.HTTPError as e:
        log.error(f"OpenAI transport failure: {e!r}")
        raise UpstreamError(UPSTREAM_FALLBACK_MESSAGE)

    if not r.is_success:
        message = _upstream_message(r)
        log.error(f"OpenAI error {r.status_code}: {_safe_snippet(r.text)}")
        raise UpstreamError(message)

    try:
        data = r.json()
    except ValueError:
        raise Unexpected(f"Unexpected OpenAI response: {_safe_snippet(r.text, 200)}")

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None
    if not content or not isinstance(content, str):
        log.error(f"OpenAI returned no completion: {_safe_snippet(r.text)}")
        raise EmptyCompletion("No completion returned")
    return content


async def chat_completion(
    client: Optional[httpx.AsyncClient], api_key: str, system: str, user: str
) -> str:
    """
    Returns the raw completion text for one system/user exchange.
    With LLM_PROVIDER=mock no request is made and a canned plan is returned.
    """
    provider = (settings.LLM_PROVIDER or "").lower().strip()

    if provider == "mock":
        return json.dumps(MOCK_PLAN)

    if provider != "openai":
        raise Unexpected(f"Unsupported LLM_PROVIDER={settings.LLM_PROVIDER}. Use openai or mock.")

    if client is not None:
        return await _openai_chat(client, api_key, system, user)

    async with httpx.AsyncClient(timeout=_timeout()) as own:
        return await _openai_chat(own, api_key, system, user)
