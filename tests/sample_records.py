"""Record types of every supported shape, shared across tests."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, NotRequired, TypedDict

from attr import define
from pydantic import BaseModel
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class State(Enum):
    TODO = "TODO"
    DONE = "DONE"


@dataclass(frozen=True)
class Task:
    id: int
    state: State


class Car(BaseModel):
    make: str
    year: int


@define
class Song:
    title: str
    rating: float | None = None


class Point(NamedTuple):
    x: int
    y: int


class Row(TypedDict):
    name: str
    team: NotRequired[str]


class Base(DeclarativeBase):
    metadata = MetaData()


class Account(Base):
    __tablename__ = "account"

    id: Mapped[int] = mapped_column(primary_key=True)
    owner: Mapped[str] = mapped_column()
    active: Mapped[bool] = mapped_column()

