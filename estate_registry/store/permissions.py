from typing import Optional

from estate_registry.core.config import settings


class PermissionStore:
    """View flags keyed by (document id, viewer) in the ``viewer-permissions`` map."""

    def __init__(self, view, map_name: str = settings.PERMISSIONS_MAP, default: bool = False):
        self.view = view
        self.map_name = map_name
        self.default = default

    def grant(self, doc_id: int, viewer: str) -> None:
        self.view.put(self.map_name, (doc_id, viewer), True)

    def revoke(self, doc_id: int, viewer: str) -> None:
        # Explicit False, kept distinct from "never granted"
        self.view.put(self.map_name, (doc_id, viewer), False)

    def lookup(self, doc_id: int, viewer: str) -> Optional[bool]:
        return self.view.get(self.map_name, (doc_id, viewer))

    def can_view(self, doc_id: int, viewer: str) -> bool:
        flag = self.lookup(doc_id, viewer)
        return self.default if flag is None else flag
