"""Tests for the completion table."""

from zhttp.completion import (
    COMMON_HEADERS,
    HTTP_METHODS,
    complete,
    is_method_position,
)


class TestIsMethodPosition:
    def test_blank_line(self):
        assert is_method_position("") is True
        assert is_method_position("   ") is True

    def test_line_starting_with_method(self):
        assert is_method_position("GET https://example.com") is True
        assert is_method_position("  post ") is True

    def test_header_line(self):
        assert is_method_position("Content-Type: text/plain") is False


class TestComplete:
    """Tests for complete()."""

    def test_column_zero_offers_methods(self):
        items = complete("Content-Type: ", 0)
        assert [item.label for item in items] == list(HTTP_METHODS)
        assert items[0].insert_text == "GET "
        assert items[0].kind == "method"
        assert items[0].sort_text == "00"

    def test_method_line_offers_methods(self):
        items = complete("DELETE https://example.com", 7)
        assert all(item.kind == "method" for item in items)

    def test_header_position_offers_headers(self):
        items = complete("Acc", 3)
        assert len(items) == len(COMMON_HEADERS)
        assert items[0].label == "Accept"
        assert items[0].insert_text == "Accept: application/json"
        assert items[0].kind == "header"
        assert items[0].detail == "HTTP Header"

    def test_header_without_default_value(self):
        items = {item.insert_text for item in complete("X", 1)}
        assert "Cookie: " in items
        assert "Authorization: Bearer " in items

    def test_multipart_content_type_is_offered(self):
        items = {item.insert_text for item in complete("C", 1)}
        assert "Content-Type: multipart/form-data" in items

    def test_sort_text_is_zero_padded(self):
        items = complete("X", 1)
        assert items[10].sort_text == "10"
        assert items[3].sort_text == "03"
