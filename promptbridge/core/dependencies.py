import httpx
from fastapi import Request

from promptbridge.core.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
