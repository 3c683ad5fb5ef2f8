from datetime import datetime
from typing import Optional
from pydantic import BaseModel

class EntryIn(BaseModel):
    title: str = ""
    description: str = ""
    # left optional here so a payload without timestamps is rejected by the store
    created_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None

class EntryPatch(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None

class EntryOut(BaseModel):
    id: int
    title: str
    description: str
    created_at: datetime
    scheduled_at: datetime

    class Config:
        from_attributes = True

class Message(BaseModel):
    msg: str
