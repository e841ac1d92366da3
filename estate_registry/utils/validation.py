from typing import Sequence

from estate_registry.core.config import settings
from estate_registry.core.errors import FilesizeLimitError, TagValidationError, TitleFormatError


def _is_printable_ascii(value: str) -> bool:
    return value.isascii() and value.isprintable()


def _check_text(value, field: str, max_length: int) -> None:
    if not isinstance(value, str):
        raise TitleFormatError(field, f"{field.capitalize()} must be a string")
    if not 1 <= len(value) <= max_length:
        raise TitleFormatError(field, f"{field.capitalize()} must be 1-{max_length} characters")
    if not _is_printable_ascii(value):
        raise TitleFormatError(field, f"{field.capitalize()} must be printable ASCII")


def validate_title(title: str) -> None:
    _check_text(title, "title", settings.TITLE_MAX_LENGTH)


def validate_description(description: str) -> None:
    # Shares the title error kind
    _check_text(description, "description", settings.DESCRIPTION_MAX_LENGTH)


def validate_filesize(filesize: int) -> None:
    limit = settings.MAX_FILE_SIZE
    if isinstance(filesize, bool) or not isinstance(filesize, int) or not 1 <= filesize < limit:
        raise FilesizeLimitError(filesize, limit)


def validate_tags(tags: Sequence[str]) -> None:
    """Tag order is kept as given; duplicates are allowed."""
    if not isinstance(tags, (list, tuple)) or not 1 <= len(tags) <= settings.MAX_TAGS:
        raise TagValidationError(f"Between 1 and {settings.MAX_TAGS} tags are required")
    for i, tag in enumerate(tags):
        if not isinstance(tag, str) or not 1 <= len(tag) <= settings.TAG_MAX_LENGTH:
            raise TagValidationError(f"Tag {i} must be 1-{settings.TAG_MAX_LENGTH} characters", index=i)
        if not _is_printable_ascii(tag):
            raise TagValidationError(f"Tag {i} must be printable ASCII", index=i)


def validate_fields(title: str, filesize: int, description: str, tags: Sequence[str]) -> None:
    validate_title(title)
    validate_filesize(filesize)
    validate_description(description)
    validate_tags(tags)
