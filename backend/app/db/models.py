from datetime import datetime
from typing import Optional
from sqlalchemy import Column
from sqlmodel import SQLModel, Field
from .types import UTCDateTime

class Entry(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = ""
    description: str = ""
    # supplied by the caller, never generated here; stored as UTC
    created_at: datetime = Field(sa_column=Column(UTCDateTime(), nullable=False))
    scheduled_at: datetime = Field(sa_column=Column(UTCDateTime(), nullable=False))
