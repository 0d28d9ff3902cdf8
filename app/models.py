import math
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import field_validator
from sqlmodel import SQLModel, Field


class GameFields(SQLModel):
    """Client-supplied game fields, with the rules every write must pass."""

    title: str = Field(min_length=3)
    genre: str = Field(min_length=3)
    price: float = Field(ge=0)
    platform: str = Field(min_length=1)
    release_date: str = Field(min_length=4)
    description: str = Field(min_length=10)

    @field_validator("price")
    @classmethod
    def price_must_be_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value


class Game(GameFields):
    """A stored game as returned to clients."""

    # int for the in-memory store, opaque string for the database store
    id: Union[int, str]
    img_reference: str


class GameDocument(GameFields, table=True):
    __tablename__ = "games"

    # Insertion sequence; keeps listing in creation order
    seq: Optional[int] = Field(default=None, primary_key=True)

    # uuid4 hex, assigned by the database store on create
    id: str = Field(unique=True, index=True, max_length=32)
    img_reference: str

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_game(self) -> Game:
        return Game(
            id=self.id,
            img_reference=self.img_reference,
            **self.model_dump(include=set(GameFields.model_fields)),
        )
