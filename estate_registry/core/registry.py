"""
Registry: the public document operations.

Each operation validates, checks ownership, then stages its writes in one
``KeyValueStore`` transaction, so a failure at any step leaves every map and
the id counter as they were.
"""

import logging
from contextlib import contextmanager
from typing import Optional, Sequence

from estate_registry.core.errors import NotDocumentOwnerError, RegistryError
from estate_registry.models.models import Document
from estate_registry.store.documents import DocumentStore
from estate_registry.store.kv import KeyValueStore
from estate_registry.store.permissions import PermissionStore
from estate_registry.utils.blockchain import LocalHeight
from estate_registry.utils.identity import to_principal
from estate_registry.utils.validation import validate_fields

logger = logging.getLogger(__name__)


class Registry:
    def __init__(self, store: Optional[KeyValueStore] = None, height=None):
        self.store = store if store is not None else KeyValueStore()
        self.height = height if height is not None else LocalHeight()
        self._last_id = 0

    def last_document_id(self) -> int:
        return self._last_id

    # ---------------- Reads ----------------

    @property
    def documents(self) -> DocumentStore:
        return DocumentStore(self.store)

    @property
    def permissions(self) -> PermissionStore:
        return PermissionStore(self.store)

    def get(self, doc_id: int) -> Document:
        return self.documents.require(doc_id)

    def exists(self, doc_id: int) -> bool:
        return self.documents.exists(doc_id)

    def can_view(self, doc_id: int, viewer: str) -> bool:
        return self.permissions.can_view(doc_id, to_principal(viewer))

    # ---------------- Writes ----------------

    def register(self, caller: str, title: str, filesize: int, description: str, tags: Sequence[str]) -> int:
        with self._operation("register", caller):
            caller = to_principal(caller)
            validate_fields(title, filesize, description, tags)
            tags = list(tags)
            next_id = self._last_id + 1
            with self.store.transaction() as tx:
                DocumentStore(tx).create(
                    next_id,
                    title=title,
                    owner=caller,
                    filesize=filesize,
                    registered_at=self.height.current(),
                    description=description,
                    tags=tags,
                )
                PermissionStore(tx).grant(next_id, caller)
            self._last_id = next_id
        logger.info(f"Document {next_id} registered by {caller}")
        return next_id

    def update(
        self, caller: str, doc_id: int, title: str, filesize: int, description: str, tags: Sequence[str]
    ) -> Document:
        with self._operation("update", caller, doc_id):
            caller = self._require_owner(caller, doc_id)
            validate_fields(title, filesize, description, tags)
            tags = list(tags)
            with self.store.transaction() as tx:
                doc = DocumentStore(tx).update_fields(doc_id, title, filesize, description, tags)
        logger.info(f"Document {doc_id} updated by {caller}")
        return doc

    def transfer_ownership(self, caller: str, doc_id: int, new_owner: str) -> Document:
        with self._operation("transfer", caller, doc_id):
            caller = self._require_owner(caller, doc_id)
            new_owner = to_principal(new_owner)
            with self.store.transaction() as tx:
                doc = DocumentStore(tx).set_owner(doc_id, new_owner)
        logger.info(f"Document {doc_id} transferred from {caller} to {new_owner}")
        return doc

    def delete(self, caller: str, doc_id: int) -> None:
        with self._operation("delete", caller, doc_id):
            caller = self._require_owner(caller, doc_id)
            with self.store.transaction() as tx:
                DocumentStore(tx).remove(doc_id)
        logger.info(f"Document {doc_id} deleted by {caller}")

    def grant_view(self, caller: str, doc_id: int, viewer: str) -> None:
        with self._operation("grant_view", caller, doc_id):
            self._require_owner(caller, doc_id)
            viewer = to_principal(viewer)
            with self.store.transaction() as tx:
                PermissionStore(tx).grant(doc_id, viewer)
        logger.info(f"View on document {doc_id} granted to {viewer}")

    def revoke_view(self, caller: str, doc_id: int, viewer: str) -> None:
        with self._operation("revoke_view", caller, doc_id):
            self._require_owner(caller, doc_id)
            viewer = to_principal(viewer)
            with self.store.transaction() as tx:
                PermissionStore(tx).revoke(doc_id, viewer)
        logger.info(f"View on document {doc_id} revoked for {viewer}")

    # ---------------- Helpers ----------------

    def _require_owner(self, caller: str, doc_id: int) -> str:
        caller = to_principal(caller)
        doc = self.documents.require(doc_id)
        if doc.owner != caller:
            raise NotDocumentOwnerError(doc_id, caller)
        return caller

    @contextmanager
    def _operation(self, name: str, caller: str, doc_id: Optional[int] = None):
        try:
            yield
        except RegistryError as e:
            target = f" on document {doc_id}" if doc_id is not None else ""
            logger.warning(f"{name}{target} by {caller} rejected: {e.error_code}")
            raise
