from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from promptbridge.core.config import Settings

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    # DB URL 은 DATABASE_URL 그대로 사용 (postgresql / mysql+pymysql / sqlite)
    return create_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,
        # 연결 끊김 방지 옵션
        pool_pre_ping=True,   # 쿼리 실행 직전에 연결 상태를 확인하고, 끊어졌으면 자동으로 재연결한다.
        pool_recycle=3600     # => 1시간(3600초)마다 연결을 강제로 갱신
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    # 세션 팩토리는 lifespan 에서 app.state 에 주입된다
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
