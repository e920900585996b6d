"""라우트별 옵션 테이블과 기본값 병합.

각 라우트는 (필드명, 기본값) 테이블을 가진다. 요청에 필드가 없거나 null 이면
기본값으로 채우고, 값이 있으면(0, False 포함) 그대로 전달한다.
기본값이 ``OMIT`` 인 필드는 요청에 없으면 업스트림 payload 에서 빠진다.
"""
from typing import Any, Dict, Mapping, Tuple


class _Omit:
    def __repr__(self) -> str:
        return "OMIT"


OMIT = _Omit()

OptionTable = Tuple[Tuple[str, Any], ...]


# POST /dall-e-3
DALLE_OPTIONS: OptionTable = (
    ("prompt", OMIT),
    ("n", 1),
    ("size", "1024x1024"),
    ("quality", "standard"),  # "hd" 또는 "standard"
)

# POST /text2img (기본값 없음, 받은 필드만 전달)
TEXT2IMG_OPTIONS: OptionTable = (
    ("prompt", OMIT),
    ("negative_prompt", OMIT),
    ("width", OMIT),
    ("height", OMIT),
    ("samples", OMIT),
    ("num_inference_steps", OMIT),
    ("seed", OMIT),  # null 이면 업스트림이 랜덤 시드 사용
    ("guidance_scale", OMIT),
    ("webhook", OMIT),
    ("track_id", OMIT),
)

# POST /text2img2
REALTIME_TEXT2IMG_OPTIONS: OptionTable = (
    ("prompt", "ultra realistic close up portrait ((beautiful pale cyberpunk female with heavy black eyeliner))"),
    ("negative_prompt", "bad quality"),
    ("width", 512),
    ("height", 512),
    ("samples", 1),  # 최대 4
    ("safety_checker", False),
    ("seed", None),
    ("guidance_scale", 5),  # 1 ~ 5
    ("webhook", None),
    ("track_id", None),
    ("instant_response", False),
    ("base64", False),
)


def merge_options(table: OptionTable, provided: Mapping[str, Any]) -> Dict[str, Any]:
    """``provided`` 를 옵션 테이블과 병합한 새 dict 를 반환한다.

    테이블에 없는 필드는 버린다. ``OMIT`` 기본값 필드는 요청에 키가 있을 때만
    (명시적 null 포함) 결과에 들어간다.
    """
    merged: Dict[str, Any] = {}
    for name, default in table:
        if default is OMIT:
            if name in provided:
                merged[name] = provided[name]
            continue
        value = provided.get(name)
        merged[name] = default if value is None else value
    return merged
