import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status

from estate_registry.core.config import settings
from estate_registry.core.registry import Registry
from estate_registry.models.models import APIResponse, Document
from estate_registry.schemas import DocumentFieldsRequest, DocumentResponse, GrantViewerRequest, TransferOwnershipRequest
from estate_registry.store.kv import KeyValueStore
from estate_registry.utils.blockchain import build_height_source

logger = logging.getLogger(__name__)

router = APIRouter()

_registry: Optional[Registry] = None


def get_registry() -> Registry:
    global _registry
    if _registry is None:
        _registry = Registry(KeyValueStore(), build_height_source(settings))
        logger.info(f"Registry initialised on {settings.NETWORK} network")
    return _registry


def get_caller(x_caller: Optional[str] = Header(None, alias=settings.CALLER_HEADER)) -> str:
    """Caller identity as supplied by the host; the registry validates its format."""
    if not x_caller:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=f"Missing {settings.CALLER_HEADER} header")
    return x_caller


def _document_data(doc: Document) -> dict:
    return DocumentResponse(**doc.model_dump()).model_dump()


# Handlers are coroutines that never await, so the event loop runs one
# registry operation at a time.

@router.post("/", response_model=APIResponse, status_code=status.HTTP_201_CREATED)
async def register_document(
    request: DocumentFieldsRequest,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
):
    doc_id = registry.register(caller, request.title, request.filesize, request.description, request.tags)
    return APIResponse(success=True, message="Document registered", data={"id": doc_id})


@router.get("/{doc_id}", response_model=APIResponse)
async def get_document(doc_id: int, registry: Registry = Depends(get_registry)):
    return APIResponse(success=True, message="Document fetched", data=_document_data(registry.get(doc_id)))


@router.put("/{doc_id}", response_model=APIResponse)
async def update_document(
    doc_id: int,
    request: DocumentFieldsRequest,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
):
    doc = registry.update(caller, doc_id, request.title, request.filesize, request.description, request.tags)
    return APIResponse(success=True, message="Document updated", data=_document_data(doc))


@router.post("/{doc_id}/transfer", response_model=APIResponse)
async def transfer_document_ownership(
    doc_id: int,
    request: TransferOwnershipRequest,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
):
    doc = registry.transfer_ownership(caller, doc_id, request.new_owner)
    return APIResponse(success=True, message="Document ownership transferred", data=_document_data(doc))


@router.delete("/{doc_id}", response_model=APIResponse)
async def delete_document(
    doc_id: int,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
):
    registry.delete(caller, doc_id)
    return APIResponse(success=True, message="Document deleted", data={"id": doc_id})


@router.post("/{doc_id}/viewers", response_model=APIResponse)
async def grant_viewer(
    doc_id: int,
    request: GrantViewerRequest,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
):
    registry.grant_view(caller, doc_id, request.viewer)
    return APIResponse(success=True, message="View permission granted", data={"id": doc_id, "viewer": request.viewer})


@router.delete("/{doc_id}/viewers/{viewer}", response_model=APIResponse)
async def revoke_viewer(
    doc_id: int,
    viewer: str,
    caller: str = Depends(get_caller),
    registry: Registry = Depends(get_registry),
):
    registry.revoke_view(caller, doc_id, viewer)
    return APIResponse(success=True, message="View permission revoked", data={"id": doc_id, "viewer": viewer})


@router.get("/{doc_id}/viewers/{viewer}", response_model=APIResponse)
async def check_viewer(doc_id: int, viewer: str, registry: Registry = Depends(get_registry)):
    return APIResponse(
        success=True,
        message="View permission fetched",
        data={"id": doc_id, "viewer": viewer, "can_view": registry.can_view(doc_id, viewer)},
    )
