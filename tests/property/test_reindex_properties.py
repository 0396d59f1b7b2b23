# tests/property/test_reindex_properties.py
"""Property-based tests for page reindexing.

Whatever the keys and URLs, a reindex cycle with a no-op get_pages
handler must keep every record exactly once, by identity and in order.
"""

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from picocompat.plugins.dispatcher import AliasDispatcher
from picocompat.plugins.pages import DUPLICATE_MARKER, derive_page_id, reindex_pages
from picocompat.plugins.registry import LegacyPluginRegistry

BASE = "http://example.com/"

page_paths = st.text(alphabet="abc/?~", max_size=6)

page_records = st.one_of(
    st.builds(lambda path: {"url": BASE + path, "meta": {}}, page_paths),
    st.builds(lambda path: {"url": "http://other.org/" + path, "meta": {}}, page_paths),
    st.builds(lambda path: {"id": path, "meta": {}}, page_paths),
)

page_collections = st.lists(page_records, max_size=12).map(lambda records: {f"key{i}": record for i, record in enumerate(records)})


class NoOpPlugin:
    def get_pages(self, *args: Any) -> None:
        pass


def _dispatcher() -> AliasDispatcher:
    registry = LegacyPluginRegistry()
    registry.register(NoOpPlugin())
    return AliasDispatcher(registry)


class TestReindexProperties:
    @given(pages=page_collections, url_rewriting=st.booleans())
    @settings(max_examples=100)
    def test_records_preserved_by_identity_and_order(self, pages: dict[str, dict[str, Any]], url_rewriting: bool) -> None:
        result = reindex_pages(pages, _dispatcher(), base_url=BASE, url_rewriting=url_rewriting)

        assert [id(record) for record in result.values()] == [id(record) for record in pages.values()]

    @given(pages=page_collections, url_rewriting=st.booleans())
    @settings(max_examples=100)
    def test_keys_derive_from_id_or_url(self, pages: dict[str, dict[str, Any]], url_rewriting: bool) -> None:
        result = reindex_pages(pages, _dispatcher(), base_url=BASE, url_rewriting=url_rewriting)

        for key, record in result.items():
            candidate = record["id"] if "id" in record else derive_page_id(record["url"], BASE, url_rewriting)
            assert key == candidate or key.startswith(candidate + DUPLICATE_MARKER)

    @given(pages=page_collections)
    @settings(max_examples=100)
    def test_reindex_is_deterministic(self, pages: dict[str, dict[str, Any]]) -> None:
        first = reindex_pages(pages, _dispatcher(), base_url=BASE, url_rewriting=False)
        second = reindex_pages(pages, _dispatcher(), base_url=BASE, url_rewriting=False)

        assert list(first) == list(second)
