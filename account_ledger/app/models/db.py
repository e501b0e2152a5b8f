from __future__ import annotations
from sqlmodel import Field, SQLModel

class StateEntry(SQLModel, table=True):
    key: str = Field(primary_key=True, index=True)
    value: bytes
