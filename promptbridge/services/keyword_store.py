import logging
from typing import Sequence

from sqlalchemy import insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from promptbridge.core.results import ErrorCode, Failure, Result, Success
from promptbridge.database.models import CATEGORY_WORD_CONSTRAINT, Keyword

logger = logging.getLogger(__name__)

ADD_SUCCESS_MESSAGE = "Keywords added successfully"
SUPPORTED_DIALECTS = ("postgresql", "sqlite", "mysql", "mariadb")


def _database_failure(context: str, e: SQLAlchemyError) -> Failure:
    # 드라이버 메시지를 그대로 응답에 포함한다
    detail = str(getattr(e, "orig", None) or e)
    return Failure(code=ErrorCode.DATABASE_ERROR, message=f"{context}: {detail}", cause=detail)


def insert_ignoring_duplicates(dialect_name: str, category: str, word: str):
    """(category, word) 중복이면 아무 것도 하지 않는 INSERT 문."""
    values = {"category": category, "word": word}
    if dialect_name == "postgresql":
        return postgresql.insert(Keyword).values(**values).on_conflict_do_nothing(
            constraint=CATEGORY_WORD_CONSTRAINT
        )
    if dialect_name == "sqlite":
        return sqlite.insert(Keyword).values(**values).on_conflict_do_nothing(
            index_elements=["category", "word"]
        )
    if dialect_name in ("mysql", "mariadb"):
        return insert(Keyword).values(**values).prefix_with("IGNORE")
    raise NotImplementedError(f"Unsupported database dialect: {dialect_name}")


def list_keywords(db: Session) -> Result:
    try:
        rows = db.execute(select(Keyword.category, Keyword.word).order_by(Keyword.id)).all()
    except SQLAlchemyError as e:
        logger.error("Database connection error: %s", e)
        return _database_failure("Database connection error", e)
    return Success([{"category": row.category, "word": row.word} for row in rows])


def list_categories(db: Session) -> Result:
    try:
        categories = db.execute(select(Keyword.category).distinct()).scalars().all()
    except SQLAlchemyError as e:
        logger.error("Error fetching categories: %s", e)
        return _database_failure("Error fetching categories", e)
    return Success(list(categories))


def add_keywords(db: Session, category: str, words: Sequence[str]) -> Result:
    """카테고리 하나에 키워드 여러 개를 한 트랜잭션으로 저장한다.

    단어마다 INSERT 를 따로 실행하지만 중간에 하나라도 실패하면 전체를 롤백한다.
    이미 있는 (category, word) 는 조용히 건너뛴다.
    """
    dialect_name = db.get_bind().dialect.name
    if dialect_name not in SUPPORTED_DIALECTS:
        detail = f"Unsupported database dialect: {dialect_name}"
        logger.error("Error updating database: %s", detail)
        return Failure(code=ErrorCode.DATABASE_ERROR, message=f"Error updating database: {detail}", cause=detail)

    try:
        for word in words:
            db.execute(insert_ignoring_duplicates(dialect_name, category, word))
        db.commit()  # 모든 키워드를 한 번에 최종 저장
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error updating database: %s", e)
        return _database_failure("Error updating database", e)

    logger.info("Stored %d keyword(s) under category %r", len(words), category)
    return Success(ADD_SUCCESS_MESSAGE)
