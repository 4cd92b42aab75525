"""Cat record schema."""

from __future__ import annotations

from pydantic import BaseModel


class Cat(BaseModel):
    name: str
    age: int | float
    breed: str
