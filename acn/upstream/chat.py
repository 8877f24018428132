"""
Customer-service chat backed by the OpenAI chat completions API.

The upstream is optional: without ``OPENAI_API_KEY``, or when the call
fails for any reason, the reply comes from the keyword rules in
``canned``. The user never sees an upstream error.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..config import Settings
from . import transport
from .canned import canned_reply

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
MAX_TOKENS = 500
TEMPERATURE = 0.7

SYSTEM_PROMPT = (
    "당신은 ACN(Animal Care Net) 반려동물 케어 플랫폼의 고객센터 상담원입니다. "
    "친절하고 전문적으로 반려동물 관련 질문에 답변해주세요. "
    "사료, 간식, 용품, 동물병원, 펫보험, 유기동물 등에 대한 정보를 제공할 수 있습니다."
)
NO_ANSWER = "죄송합니다. 답변을 생성할 수 없습니다."


def build_messages(message: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]


def _extract_reply(payload: Any) -> str:
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return NO_ANSWER
    return content or NO_ANSWER


def generate_reply(settings: Settings, message: str) -> str:
    """Answer ``message``, falling back to a canned reply."""
    if not settings.openai_api_key:
        return canned_reply(message)

    body = {
        "model": settings.openai_model,
        "messages": build_messages(message),
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }
    try:
        payload = transport.post_json(
            CHAT_COMPLETIONS_URL,
            body,
            headers={"Authorization": f"Bearer {settings.openai_api_key}"},
            timeout=settings.upstream_timeout,
        )
    except transport.UpstreamStatusError as exc:
        logger.error("OpenAI API error (status %s): %s", exc.status, exc.body)
        return canned_reply(message)
    except transport.UpstreamError as exc:
        logger.error("Chat completion proxy error: %s", exc)
        return canned_reply(message)
    return _extract_reply(payload)
