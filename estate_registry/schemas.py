from pydantic import BaseModel
from typing import Any, List

# ---------------- Request schemas for document routes ----------------
# Document fields are taken as raw JSON values and checked by the registry,
# so wrong types and bound violations both surface as registry error codes
# rather than generic 422s.

class DocumentFieldsRequest(BaseModel):
    title: Any
    filesize: Any
    description: Any
    tags: Any

class TransferOwnershipRequest(BaseModel):
    new_owner: str  # account address

class GrantViewerRequest(BaseModel):
    viewer: str  # account address

class DocumentResponse(BaseModel):
    id: int
    title: str
    owner: str
    filesize: int
    registered_at: int
    description: str
    tags: List[str]
