from typing import Any, Dict, List, Optional

import httpx

from promptbridge.core.config import Settings
from promptbridge.core.results import Result
from promptbridge.services.upstream import bearer, post_json

CHAT_FAILURE_MESSAGE = "Failed to generate text"

# messages 가 없을 때 통째로 대체되는 기본 대화
DEFAULT_MESSAGES: List[Dict[str, Any]] = [
    {"role": "system", "content": "You are a helpful assistant."},
    {"role": "user", "content": "Tell me a joke."},
]


def build_chat_payload(settings: Settings, messages: Optional[Any]) -> Dict[str, Any]:
    if messages is None:
        messages = [dict(message) for message in DEFAULT_MESSAGES]
    return {"model": settings.OPENAI_CHAT_MODEL, "messages": messages}


async def complete_chat(
    client: httpx.AsyncClient, settings: Settings, messages: Optional[Any]
) -> Result:
    # DALL-E 와 같은 API 키 사용
    return await post_json(
        client,
        settings.OPENAI_CHAT_URL,
        build_chat_payload(settings, messages),
        headers=bearer(settings.DALL_E_API_KEY),
        failure_message=CHAT_FAILURE_MESSAGE,
        label="Chat Completions API",
    )
