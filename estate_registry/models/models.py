## Domain records and response envelopes. Request bodies live in estate_registry/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple


# Document Models
class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    owner: str  # checksum address
    filesize: int
    registered_at: int  # block height at registration
    description: str
    tags: Tuple[str, ...]


# API Response Models
class APIResponse(BaseModel):
    success: bool
    message: str
    data: Optional[dict] = None

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error_code: Optional[str] = None
    details: Optional[dict] = None
