"""Registry error taxonomy.

Every failure a registry operation can report is a ``RegistryError``. The
HTTP layer renders them through one exception handler using ``status_code``
and ``error_code``; nothing below the routes knows about HTTP otherwise.
"""

from typing import Any, Dict, Optional


class RegistryError(Exception):
    """Base error for all registry failures."""

    status_code = 400

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# ---------------- Validation ----------------

class TitleFormatError(RegistryError):
    """Title or description outside its length bound or not printable ASCII."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"Invalid {field}", "TITLE_FORMAT", {"field": field})


class FilesizeLimitError(RegistryError):
    def __init__(self, filesize: Any, limit: int):
        super().__init__(
            f"Filesize must be an integer in [1, {limit})",
            "FILESIZE_LIMIT",
            {"filesize": filesize, "limit": limit},
        )


class TagValidationError(RegistryError):
    def __init__(self, message: str, index: Optional[int] = None):
        details = {"index": index} if index is not None else {}
        super().__init__(message, "TAG_VALIDATION", details)


class InvalidPrincipalError(RegistryError):
    def __init__(self, value: Any):
        super().__init__(f"Not a valid account address: {value!r}", "INVALID_PRINCIPAL", {"value": str(value)})


# ---------------- Documents ----------------

class DocNotFoundError(RegistryError):
    status_code = 404

    def __init__(self, doc_id: int):
        super().__init__(f"Document {doc_id} does not exist", "DOC_NOT_FOUND", {"doc_id": doc_id})


class DocAlreadyExistsError(RegistryError):
    """Raised if an id is reused; unreachable while the counter only moves forward."""

    status_code = 409

    def __init__(self, doc_id: int):
        super().__init__(f"Document {doc_id} already exists", "DOC_ALREADY_EXISTS", {"doc_id": doc_id})


class NotDocumentOwnerError(RegistryError):
    status_code = 403

    def __init__(self, doc_id: int, caller: str):
        super().__init__(
            f"Caller is not the owner of document {doc_id}",
            "NOT_DOCUMENT_OWNER",
            {"doc_id": doc_id, "caller": caller},
        )


# ---------------- Access control ----------------
# Declared for a permission-gated read path; no operation raises these yet.

class AdminOperationDenied(RegistryError):
    status_code = 403

    def __init__(self, message: str = "Admin operation denied"):
        super().__init__(message, "ADMIN_OPERATION_DENIED")


class PermissionDeniedError(RegistryError):
    status_code = 403

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, "PERMISSION_DENIED")


class ReadingRestrictedError(RegistryError):
    status_code = 403

    def __init__(self, message: str = "Reading restricted"):
        super().__init__(message, "READING_RESTRICTED")
