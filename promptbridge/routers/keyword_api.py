# --- 라이브러리 임포트 ---
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

# --- 내부 모듈 임포트 ---
from promptbridge.core.results import Failure, error_response
from promptbridge.database import get_db
from promptbridge.services import keyword_store

# --- 라우터 및 데이터 모델 정의 ---
router = APIRouter()

class KeywordCreateRequest(BaseModel):
    category: str = Field(..., description="키워드 카테고리", examples=["mood"])
    keywords: List[str] = Field(..., description="저장할 키워드 목록", examples=[["happy", "sad"]])

class KeywordItem(BaseModel):
    category: str
    word: str


# --- API 엔드포인트 ---
# DB 작업은 동기 세션이므로 일반 def 로 정의 (스레드풀에서 실행)
@router.get("/keywords",
            summary="저장된 키워드 전체 조회",
            response_model=List[KeywordItem])
def read_keywords(db: Session = Depends(get_db)):
    result = keyword_store.list_keywords(db)
    if isinstance(result, Failure):
        return error_response(result)
    return result.payload


@router.post("/keywords",
             summary="카테고리별 키워드 일괄 저장 (중복은 무시)",
             response_class=PlainTextResponse,
             status_code=status.HTTP_200_OK)
def create_keywords(request: KeywordCreateRequest, db: Session = Depends(get_db)):
    """
    category 하나와 keywords 목록을 받아 한 트랜잭션으로 저장합니다.
    중간에 오류가 나면 전부 롤백됩니다.
    """
    result = keyword_store.add_keywords(db, request.category, request.keywords)
    if isinstance(result, Failure):
        return error_response(result)
    return PlainTextResponse(result.payload)


@router.get("/categories",
            summary="중복 없는 카테고리 목록 조회",
            response_model=List[str])
def read_categories(db: Session = Depends(get_db)):
    result = keyword_store.list_categories(db)
    if isinstance(result, Failure):
        return error_response(result)
    return result.payload
