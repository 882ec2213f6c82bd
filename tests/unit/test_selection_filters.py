"""Tests for the field name, extension and count filters."""

import pytest

from neo_uploads.application.filters import (
    filter_by_field_name,
    filter_by_extension,
    filter_by_max_count,
    apply_filters,
)
from neo_uploads.core.entities import UploadedPart, SkipReason
from neo_uploads.core.value_objects import UploadOptions


def part(field_name, original_name):
    return UploadedPart(field_name=field_name, original_name=original_name, content=b"x")


class TestFieldNameFilter:

    def test_passes_through_without_allow_list(self):
        parts = [part("a", "a.txt"), part("b", "b.txt")]
        assert filter_by_field_name(None, parts) is parts
        assert filter_by_field_name([], parts) is parts

    def test_keeps_allowed_names_in_allow_list_order(self):
        a, b, c = part("a", "1.txt"), part("b", "2.txt"), part("c", "3.txt")
        result = filter_by_field_name(["b", "a"], [a, b, c])
        assert result == [b, a]

    def test_first_match_per_name(self):
        first, second = part("file", "first.txt"), part("file", "second.txt")
        assert filter_by_field_name(["file"], [first, second]) == [first]

    def test_records_skipped_parts(self):
        skipped = []
        filter_by_field_name(["a"], [part("a", "a.txt"), part("c", "c.txt")], skipped)
        assert len(skipped) == 1
        assert skipped[0].file == "c.txt"
        assert skipped[0].field_name == "c"
        assert skipped[0].reason == SkipReason.FIELD_NOT_ALLOWED

    def test_duplicate_allowed_name_selected_once(self):
        a = part("a", "a.txt")
        assert filter_by_field_name(["a", "a"], [a]) == [a]


class TestExtensionFilter:

    def test_passes_through_without_allow_list(self):
        parts = [part("a", "a.txt")]
        assert filter_by_extension(None, parts) is parts

    def test_keeps_matching_extension(self):
        photo, doc = part("f1", "photo.png"), part("f2", "doc.pdf")
        assert filter_by_extension(["png"], [photo, doc]) == [photo]

    def test_orders_by_allow_list(self):
        doc, photo = part("f1", "doc.pdf"), part("f2", "photo.png")
        assert filter_by_extension(["png", "pdf"], [doc, photo]) == [photo, doc]

    def test_case_insensitive_and_last_dot(self):
        upper, archive = part("f1", "PHOTO.PNG"), part("f2", "backup.tar.gz")
        assert filter_by_extension(["png", "gz"], [upper, archive]) == [upper, archive]
        assert filter_by_extension(["tar"], [archive]) == []

    def test_dot_free_names_never_match(self):
        assert filter_by_extension(["txt", ""], [part("f", "README")]) == []

    def test_records_skipped_parts(self):
        skipped = []
        filter_by_extension(["png"], [part("f1", "photo.png"), part("f2", "doc.pdf")], skipped)
        assert [(s.file, s.reason) for s in skipped] == [("doc.pdf", SkipReason.EXTENSION_NOT_ALLOWED)]


class TestMaxCountFilter:

    @pytest.mark.parametrize("max_count", [None, 0, -1])
    def test_passes_through_without_positive_cap(self, max_count):
        parts = [part("a", "a.txt"), part("b", "b.txt")]
        assert filter_by_max_count(max_count, parts) == parts
        assert len(parts) == 2

    def test_truncates_in_place(self):
        a, b, c = part("a", "a.txt"), part("b", "b.txt"), part("c", "c.txt")
        parts = [a, b, c]
        result = filter_by_max_count(2, parts)
        assert result is parts
        assert parts == [a, b]

    def test_cap_above_length_keeps_all(self):
        parts = [part("a", "a.txt")]
        assert filter_by_max_count(5, parts) == parts

    def test_records_skipped_parts(self):
        skipped = []
        filter_by_max_count(1, [part("a", "a.txt"), part("b", "b.txt")], skipped)
        assert [(s.file, s.reason) for s in skipped] == [("b.txt", SkipReason.MAX_FILES_EXCEEDED)]


class TestFilterChain:

    def test_applies_field_then_extension_then_count(self):
        a = part("a", "a.png")
        b = part("b", "b.pdf")
        c = part("c", "c.png")
        d = part("d", "d.jpg")
        options = UploadOptions(files=["d", "b", "a", "c"], exts=["png", "jpg"], max_file=1)

        selected, skipped = apply_filters(options, [a, b, c, d])

        # field order d, b, a, c -> extensions keep a (first png), d (jpg) -> count keeps a
        assert selected == [a]
        reasons = {s.file: s.reason for s in skipped}
        assert reasons == {
            "b.pdf": SkipReason.EXTENSION_NOT_ALLOWED,
            "c.png": SkipReason.EXTENSION_NOT_ALLOWED,
            "d.jpg": SkipReason.MAX_FILES_EXCEEDED,
        }

    def test_input_list_left_intact(self):
        parts = [part("a", "a.txt"), part("b", "b.txt")]
        selected, _ = apply_filters(UploadOptions(max_file=1), parts)
        assert len(selected) == 1
        assert len(parts) == 2

    def test_no_filters_configured(self):
        parts = [part("a", "a.txt"), part("b", "b.txt")]
        selected, skipped = apply_filters(UploadOptions(), parts)
        assert selected == parts
        assert skipped == []
