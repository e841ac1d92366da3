"""Field validation bounds for titles, descriptions, filesizes and tags."""

import pytest

from estate_registry.core.errors import FilesizeLimitError, TagValidationError, TitleFormatError
from estate_registry.utils.validation import (
    validate_description,
    validate_fields,
    validate_filesize,
    validate_tags,
    validate_title,
)


class TestTitle:
    @pytest.mark.parametrize("title", ["a", "Deed123", "x" * 64, "Lot 7, Block B (north)"])
    def test_accepts_in_bounds(self, title: str) -> None:
        validate_title(title)

    @pytest.mark.parametrize("title", ["", "x" * 65])
    def test_rejects_length(self, title: str) -> None:
        with pytest.raises(TitleFormatError) as exc:
            validate_title(title)
        assert exc.value.details == {"field": "title"}

    @pytest.mark.parametrize("title", ["café", "line\nbreak", "tab\there"])
    def test_rejects_non_printable_ascii(self, title: str) -> None:
        with pytest.raises(TitleFormatError):
            validate_title(title)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TitleFormatError):
            validate_title(123)


class TestDescription:
    def test_accepts_max_length(self) -> None:
        validate_description("d" * 128)

    @pytest.mark.parametrize("description", ["", "d" * 129])
    def test_rejects_length_with_title_error(self, description: str) -> None:
        with pytest.raises(TitleFormatError) as exc:
            validate_description(description)
        assert exc.value.details == {"field": "description"}


class TestFilesize:
    @pytest.mark.parametrize("filesize", [1, 5000, 999_999_999])
    def test_accepts_in_bounds(self, filesize: int) -> None:
        validate_filesize(filesize)

    @pytest.mark.parametrize("filesize", [0, -1, 1_000_000_000, 2_000_000_000])
    def test_rejects_out_of_bounds(self, filesize: int) -> None:
        with pytest.raises(FilesizeLimitError) as exc:
            validate_filesize(filesize)
        assert exc.value.details["limit"] == 1_000_000_000

    @pytest.mark.parametrize("filesize", [True, 12.5, "5000", None])
    def test_rejects_non_integers(self, filesize) -> None:
        with pytest.raises(FilesizeLimitError):
            validate_filesize(filesize)


class TestTags:
    def test_accepts_duplicates_and_max_count(self) -> None:
        validate_tags(["deed"] * 10)

    def test_accepts_max_tag_length(self) -> None:
        validate_tags(["t" * 32])

    @pytest.mark.parametrize("tags", [[], ["t"] * 11])
    def test_rejects_count(self, tags) -> None:
        with pytest.raises(TagValidationError):
            validate_tags(tags)

    @pytest.mark.parametrize("bad", ["", "t" * 33, "über"])
    def test_rejects_bad_tag_and_reports_index(self, bad: str) -> None:
        with pytest.raises(TagValidationError) as exc:
            validate_tags(["deed", bad])
        assert exc.value.details == {"index": 1}

    @pytest.mark.parametrize("tags", ["deed", None, 5, {"deed": 1}])
    def test_rejects_non_list(self, tags) -> None:
        with pytest.raises(TagValidationError):
            validate_tags(tags)


def test_validate_fields_checks_title_first() -> None:
    with pytest.raises(TitleFormatError):
        validate_fields("", 0, "", [])


def test_validate_fields_accepts_valid_document() -> None:
    validate_fields("Deed123", 5000, "Lot 7 deed", ["deed", "lot7"])
