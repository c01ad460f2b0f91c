"""
ORM models.

Table and column names match the existing "ToDos" schema:
    Id        INTEGER PRIMARY KEY AUTOINCREMENT
    ToDoName  VARCHAR(100) NOT NULL
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from todo_service.domain.entities.todo import TODO_NAME_MAX_LENGTH


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class TodoRecord(Base):
    __tablename__ = "ToDos"

    id: Mapped[int] = mapped_column(
        "Id", Integer, primary_key=True, autoincrement=True,
    )
    todo_name: Mapped[str] = mapped_column(
        "ToDoName", String(TODO_NAME_MAX_LENGTH), nullable=False,
    )
