# --- 라이브러리 임포트 ---
from typing import Any, Optional

import httpx
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

# --- 내부 모듈 임포트 ---
from promptbridge.core.config import Settings
from promptbridge.core.dependencies import get_app_settings, get_http_client
from promptbridge.core.results import Failure, error_response
from promptbridge.services.image_generation import (
    generate_dalle_image,
    generate_realtime_text2img,
    generate_text2img,
)

# --- 라우터 및 요청 모델 정의 ---
router = APIRouter()

# 타입 검사 없이 받은 값을 그대로 업스트림에 전달한다 (기본값 병합만 수행)
class DalleRequest(BaseModel):
    prompt: Optional[Any] = Field(None, description="생성할 이미지 설명", examples=["a watercolor fox"])
    size: Optional[Any] = Field(None, description="이미지 크기 (기본 1024x1024)")
    n: Optional[Any] = Field(None, description="생성 개수 (기본 1)")
    quality: Optional[Any] = Field(None, description="standard 또는 hd (기본 standard)")

class Text2ImgRequest(BaseModel):
    prompt: Optional[Any] = None
    negative_prompt: Optional[Any] = None
    width: Optional[Any] = None
    height: Optional[Any] = None
    samples: Optional[Any] = None
    num_inference_steps: Optional[Any] = None
    seed: Optional[Any] = Field(None, description="null 이면 랜덤")
    guidance_scale: Optional[Any] = None
    webhook: Optional[Any] = None
    track_id: Optional[Any] = None

class RealtimeText2ImgRequest(BaseModel):
    prompt: Optional[Any] = None
    negative_prompt: Optional[Any] = None
    width: Optional[Any] = None
    height: Optional[Any] = None
    samples: Optional[Any] = Field(None, description="최대 4")
    safety_checker: Optional[Any] = None
    seed: Optional[Any] = None
    guidance_scale: Optional[Any] = Field(None, description="1 ~ 5")
    webhook: Optional[Any] = None
    track_id: Optional[Any] = None
    instant_response: Optional[Any] = None
    base64: Optional[Any] = None


def _relay(result):
    # 성공 시 업스트림 응답 본문을 그대로 반환
    if isinstance(result, Failure):
        return error_response(result)
    return result.payload


# --- API 엔드포인트 ---
@router.post("/dall-e-3",
             summary="DALL-E 3 이미지 생성 프록시",
             status_code=status.HTTP_200_OK)
async def generate_dalle(
    request: Optional[DalleRequest] = None,
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    fields = request.model_dump(exclude_unset=True) if request else {}
    result = await generate_dalle_image(client, settings, fields)
    return _relay(result)


@router.post("/text2img",
             summary="Stable Diffusion text2img 프록시",
             status_code=status.HTTP_200_OK)
async def text2img(
    request: Optional[Text2ImgRequest] = None,
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    fields = request.model_dump(exclude_unset=True) if request else {}
    result = await generate_text2img(client, settings, fields)
    return _relay(result)


@router.post("/text2img2",
             summary="ModelsLab realtime text2img 프록시 (필드별 기본값 적용)",
             status_code=status.HTTP_200_OK)
async def text2img_realtime(
    request: Optional[RealtimeText2ImgRequest] = None,
    settings: Settings = Depends(get_app_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    # 본문이 없어도 모든 필드가 기본값으로 채워진다
    fields = request.model_dump(exclude_unset=True) if request else {}
    result = await generate_realtime_text2img(client, settings, fields)
    return _relay(result)
