"""SQLAlchemy models for accounts and their loyalty cards."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(Text, nullable=False)
    # column is literally named "pass"
    password = Column("pass", Text, nullable=False)



class Card(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    color = Column(String(16), nullable=True)
    code = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
