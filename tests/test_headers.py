"""Tests for setcookie.headers module."""

from types import SimpleNamespace

import pytest
from setcookie.headers import header_collection, iter_header_pairs


class TestHeaderCollection:
    """Tests for header_collection function."""

    def test_none(self):
        """Test None has no headers."""
        assert header_collection(None) is None

    def test_raw_headers_preferred(self):
        """Test raw_headers wins over headers."""
        raw = [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]
        resp = SimpleNamespace(raw_headers=raw, headers={"set-cookie": "b=2"})
        assert header_collection(resp) is raw

    def test_headers_attribute(self):
        """Test the headers attribute is used without raw_headers."""
        headers = {"set-cookie": "a=1"}
        assert header_collection(SimpleNamespace(headers=headers)) is headers

    def test_mapping_headers_key(self):
        """Test a mapping response exposes its 'headers' key."""
        headers = [("set-cookie", "a=1")]
        assert header_collection({"headers": headers}) is headers

    def test_mapping_without_headers(self):
        """Test a mapping without a 'headers' key has no headers."""
        assert header_collection({"status": 200}) is None

    def test_object_without_headers(self):
        """Test an object without header attributes has no headers."""
        assert header_collection(object()) is None


class TestIterHeaderPairs:
    """Tests for iter_header_pairs function."""

    def test_none(self):
        """Test None yields nothing."""
        assert list(iter_header_pairs(None)) == []

    def test_pairs_keep_order_and_case(self):
        """Test pairs come back in order with their original case."""
        pairs = [("Set-Cookie", "a=1"), ("X-Test", "1"), ("set-cookie", "b=2")]
        assert list(iter_header_pairs(pairs)) == pairs

    def test_mapping(self):
        """Test a dict is read through items()."""
        assert list(iter_header_pairs({"A": "1", "B": "2"})) == [("A", "1"), ("B", "2")]

    def test_list_values_expanded(self):
        """Test list values give one pair per item."""
        headers = {"set-cookie": ["a=1", "b=2"]}
        assert list(iter_header_pairs(headers)) == [
            ("set-cookie", "a=1"),
            ("set-cookie", "b=2"),
        ]

    def test_bytes_decoded_as_latin1(self):
        """Test bytes names and values are decoded as latin-1."""
        headers = [(b"Set-Cookie", "caf\xe9=1".encode("latin-1"))]
        assert list(iter_header_pairs(headers)) == [("Set-Cookie", "caf\xe9=1")]

    def test_none_values_skipped(self):
        """Test None values and None list items yield nothing."""
        headers = [("Set-Cookie", None), ("set-cookie", ["a=1", None])]
        assert list(iter_header_pairs(headers)) == [("set-cookie", "a=1")]

    def test_multi_items_preferred(self, mocker):
        """Test multi_items() is used over items()."""
        headers = mocker.Mock(spec=["multi_items", "items"])
        headers.multi_items.return_value = [("set-cookie", "a=1")]
        assert list(iter_header_pairs(headers)) == [("set-cookie", "a=1")]
        headers.items.assert_not_called()

    def test_malformed_entries_raise(self):
        """Test entries that are not pairs are rejected."""
        with pytest.raises(ValueError):
            list(iter_header_pairs([("only-name",)]))
