import logging
from typing import Any, Dict, Optional

import httpx

from promptbridge.core.results import ErrorCode, Failure, Result, Success

logger = logging.getLogger(__name__)


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    payload: Dict[str, Any],
    *,
    failure_message: str,
    label: str,
    headers: Optional[Dict[str, str]] = None,
) -> Result:
    """업스트림에 JSON 을 POST 하고 응답 본문을 그대로 ``Success`` 로 돌려준다.

    네트워크 오류, 타임아웃, 2xx 가 아닌 응답, JSON 이 아닌 본문은 모두
    ``failure_message`` 를 가진 ``Failure`` 가 된다. 상세 원인은 로그에만 남긴다.
    재시도는 하지 않는다.
    """
    request_headers = {"Content-Type": "application/json"}
    if headers:
        request_headers.update(headers)

    try:
        response = await client.post(url, json=payload, headers=request_headers)
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error("Error making request to %s: %r", label, e)
        return Failure(code=ErrorCode.UPSTREAM_ERROR, message=failure_message, cause=str(e))

    return Success(data)


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
