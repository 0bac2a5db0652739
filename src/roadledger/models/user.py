"""Identity returned by the backend after a successful login."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel):
    """The signed-in ledger operator."""

    id: Optional[int] = Field(default=None)
    username: str = Field(default="")
