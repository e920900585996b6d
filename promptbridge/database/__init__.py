from promptbridge.database.database import Base, build_engine, build_session_factory, get_db
from promptbridge.database.models import Keyword

__all__ = ["Base", "Keyword", "build_engine", "build_session_factory", "get_db"]
