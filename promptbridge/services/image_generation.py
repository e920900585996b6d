"""이미지 생성 어댑터 (DALL-E 3, Stable Diffusion text2img, ModelsLab realtime text2img).

payload 조립(``build_*_payload``)은 네트워크 호출과 분리되어 있어
기본값 병합을 따로 테스트할 수 있다.
"""
from typing import Any, Dict, Mapping

import httpx

from promptbridge.core.config import Settings
from promptbridge.core.results import Result
from promptbridge.services.options import (
    DALLE_OPTIONS,
    REALTIME_TEXT2IMG_OPTIONS,
    TEXT2IMG_OPTIONS,
    merge_options,
)
from promptbridge.services.upstream import bearer, post_json

IMAGE_FAILURE_MESSAGE = "Failed to generate image"
DALLE_FAILURE_MESSAGE = "Failed to fetch data"


# --- DALL-E 3 ---

def build_dalle_payload(settings: Settings, fields: Mapping[str, Any]) -> Dict[str, Any]:
    payload = {"model": settings.OPENAI_IMAGE_MODEL}
    payload.update(merge_options(DALLE_OPTIONS, fields))
    return payload


async def generate_dalle_image(
    client: httpx.AsyncClient, settings: Settings, fields: Mapping[str, Any]
) -> Result:
    return await post_json(
        client,
        settings.OPENAI_IMAGE_URL,
        build_dalle_payload(settings, fields),
        headers=bearer(settings.DALL_E_API_KEY),
        failure_message=DALLE_FAILURE_MESSAGE,
        label="DALL-E 3 API",
    )


# --- Stable Diffusion v3 text2img ---

def build_text2img_payload(settings: Settings, fields: Mapping[str, Any]) -> Dict[str, Any]:
    payload = {"key": settings.STABLE_DIFFUSION_API_KEY}
    payload.update(merge_options(TEXT2IMG_OPTIONS, fields))
    return payload


async def generate_text2img(
    client: httpx.AsyncClient, settings: Settings, fields: Mapping[str, Any]
) -> Result:
    return await post_json(
        client,
        settings.STABLE_DIFFUSION_URL,
        build_text2img_payload(settings, fields),
        failure_message=IMAGE_FAILURE_MESSAGE,
        label="Stable Diffusion API",
    )


# --- ModelsLab realtime text2img ---

def build_realtime_text2img_payload(settings: Settings, fields: Mapping[str, Any]) -> Dict[str, Any]:
    payload = {"key": settings.STABLE_DIFFUSION_API_KEY}
    payload.update(merge_options(REALTIME_TEXT2IMG_OPTIONS, fields))
    return payload


async def generate_realtime_text2img(
    client: httpx.AsyncClient, settings: Settings, fields: Mapping[str, Any]
) -> Result:
    return await post_json(
        client,
        settings.MODELSLAB_REALTIME_URL,
        build_realtime_text2img_payload(settings, fields),
        failure_message=IMAGE_FAILURE_MESSAGE,
        label="ModelsLab API",
    )
