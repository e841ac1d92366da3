from typing import Optional, Sequence

from estate_registry.core.config import settings
from estate_registry.core.errors import DocAlreadyExistsError, DocNotFoundError
from estate_registry.models.models import Document


class DocumentStore:
    """
    Document records keyed by id, held in the ``estate-documents`` map.
    Bind it to a ``Transaction`` to write; a bare ``KeyValueStore`` is enough for reads.
    """

    def __init__(self, view, map_name: str = settings.DOCUMENTS_MAP):
        self.view = view
        self.map_name = map_name

    def get(self, doc_id: int) -> Optional[Document]:
        return self.view.get(self.map_name, doc_id)

    def exists(self, doc_id: int) -> bool:
        return self.view.contains(self.map_name, doc_id)

    def require(self, doc_id: int) -> Document:
        doc = self.get(doc_id)
        if doc is None:
            raise DocNotFoundError(doc_id)
        return doc

    def create(
        self,
        doc_id: int,
        title: str,
        owner: str,
        filesize: int,
        registered_at: int,
        description: str,
        tags: Sequence[str],
    ) -> Document:
        if self.exists(doc_id):
            raise DocAlreadyExistsError(doc_id)
        doc = Document(
            id=doc_id,
            title=title,
            owner=owner,
            filesize=filesize,
            registered_at=registered_at,
            description=description,
            tags=tuple(tags),
        )
        self.view.put(self.map_name, doc_id, doc)
        return doc

    def update_fields(self, doc_id: int, title: str, filesize: int, description: str, tags: Sequence[str]) -> Document:
        doc = self.require(doc_id).model_copy(
            update={"title": title, "filesize": filesize, "description": description, "tags": tuple(tags)}
        )
        self.view.put(self.map_name, doc_id, doc)
        return doc

    def set_owner(self, doc_id: int, new_owner: str) -> Document:
        doc = self.require(doc_id).model_copy(update={"owner": new_owner})
        self.view.put(self.map_name, doc_id, doc)
        return doc

    def remove(self, doc_id: int) -> None:
        # Permission entries for the id are left in place
        self.require(doc_id)
        self.view.delete(self.map_name, doc_id)
