import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

# 내부 모듈
from promptbridge.core.config import Settings, get_settings
from promptbridge.core.log_config import configure_logging
from promptbridge.database import Base, build_engine, build_session_factory
from promptbridge.routers import chat_api, image_api, keyword_api

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    engine: Optional[Engine] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """FastAPI 앱 생성.

    DB 엔진, 세션 팩토리, HTTP 클라이언트는 lifespan 에서 만들어 app.state 에 둔다.
    테스트에서는 engine / transport 를 주입한다.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = engine if engine is not None else build_engine(settings)

        # DB 테이블 생성 (DB 에 연결할 수 없어도 서버는 계속 뜬다)
        try:
            Base.metadata.create_all(bind=db_engine)
        except SQLAlchemyError as e:
            logger.warning("DB create_all skipped/failed: %s", e)

        app.state.session_factory = build_session_factory(db_engine)
        app.state.http_client = httpx.AsyncClient(timeout=settings.UPSTREAM_TIMEOUT, transport=transport)
        logger.info("promptbridge started")

        yield

        await app.state.http_client.aclose()
        if engine is None:
            db_engine.dispose()

    # FastAPI 인스턴스
    app = FastAPI(title="promptbridge API", lifespan=lifespan)
    app.state.settings = settings

    # 모든 origin 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(image_api.router, tags=["Images"])
    app.include_router(chat_api.router, tags=["Chat"])
    app.include_router(keyword_api.router, tags=["Keywords"])

    @app.get("/")
    def root():
        return {"message": "promptbridge API is running"}

    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Server running on port %d", settings.APP_PORT)
    uvicorn.run(
        "promptbridge.main:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
