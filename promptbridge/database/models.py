from sqlalchemy import Column, Integer, String, UniqueConstraint
from promptbridge.database.database import Base

CATEGORY_WORD_CONSTRAINT = "category_word_unique"

class Keyword(Base):
    __tablename__ = "keywords"
    __table_args__ = (
        UniqueConstraint("category", "word", name=CATEGORY_WORD_CONSTRAINT),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    category = Column(String(255), nullable=False)
    word = Column(String(255), nullable=False)
