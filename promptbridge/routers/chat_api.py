# --- 라이브러리 임포트 ---
from typing import Any, Optional

import httpx
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

# --- 내부 모듈 임포트 ---
from promptbridge.core.config import Settings
from promptbridge.core.dependencies import get_app_settings, get_http_client
from promptbridge.core.results import Failure, error_response
from promptbridge.services.chat_completion import complete_chat

# --- 라우터 및 요청 모델 정의 ---
router = APIRouter()

class ChatRequest(BaseModel):
    # 내용 검사 없이 그대로 전달
    messages: Optional[Any] = Field(
        None,
        description="role/content 메시지 목록. 없으면 기본 대화로 대체",
        examples=[[{"role": "user", "content": "Hello!"}]],
    )


# --- API 엔드포인트 ---
@router.post("/chat",
             summary="Chat Completions 프록시",
             status_code=status.HTTP_200_OK)
async def chat(
    request: Optional[ChatRequest] = None,
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    messages = request.messages if request else None
    result = await complete_chat(client, settings, messages)
    if isinstance(result, Failure):
        return error_response(result)
    return result.payload
