from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict

class EventIn(BaseModel):
    """Event as posted by a caller. Any ``id`` or ``timestamp`` sent along is dropped."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Event name")

class Event(BaseModel):
    id: int = Field(..., description="Position of the event in the store")
    name: str
    timestamp: Dict[str, Any] = Field(..., description="Decoded time service payload, stored verbatim")
