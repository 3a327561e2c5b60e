# =============================================================================
# File: forum/models.py
# Purpose: ORM models for the forum (User, Board, Topic, Reply)
# Notes:
# - SQLAlchemy 2.0 style (Mapped[...] + mapped_column)
# - Timestamps are unix seconds, rendered with the formattedTime filter
# =============================================================================
from __future__ import annotations

import time

from sqlalchemy import Integer, String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base


def _now() -> int:
    return int(time.time())


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="user", nullable=False)  # "user" | "admin"
    signature: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    created_time: Mapped[int] = mapped_column(Integer, default=_now, nullable=False)

    topics: Mapped[list["Topic"]] = relationship(back_populates="user")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class Board(Base):
    __tablename__ = "boards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    created_time: Mapped[int] = mapped_column(Integer, default=_now, nullable=False)

    topics: Mapped[list["Topic"]] = relationship(back_populates="board")


class Topic(Base):
    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)
    board_id: Mapped[int | None] = mapped_column(ForeignKey("boards.id"), index=True, nullable=True)

    created_time: Mapped[int] = mapped_column(Integer, default=_now, nullable=False)
    updated_time: Mapped[int] = mapped_column(Integer, default=_now, onupdate=_now, nullable=False)

    user: Mapped[User] = relationship(back_populates="topics")
    board: Mapped[Board | None] = relationship(back_populates="topics")
    replies: Mapped[list["Reply"]] = relationship(
        back_populates="topic",
        cascade="all, delete-orphan",
        order_by="Reply.id",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "views": self.views,
            "user_id": self.user_id,
            "board_id": self.board_id,
            "created_time": self.created_time,
            "updated_time": self.updated_time,
        }


class Reply(Base):
    __tablename__ = "replies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    topic_id: Mapped[int] = mapped_column(ForeignKey("topics.id"), index=True, nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)
    created_time: Mapped[int] = mapped_column(Integer, default=_now, nullable=False)

    topic: Mapped[Topic] = relationship(back_populates="replies")
    user: Mapped[User] = relationship()
