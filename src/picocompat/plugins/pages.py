# src/picocompat/plugins/pages.py
"""Page collection reindexing for the legacy get_pages event.

The host keeps pages in a dict keyed by unique page id. API v0 plugins
expect a plain list. The list is handed to get_pages, then a keyed dict
is rebuilt from whatever the handlers left in it:

- a record's own `id` is used as key when present;
- otherwise the key is derived from the record's `url` relative to the
  base URL, or `~unknown` for foreign URLs;
- colliding keys get `~dup1`, `~dup2`, ... (first free suffix wins).

A key derived from `url` is also stored as the record's `id`, so pages
added by a legacy handler reach the host with an id like every other page.
The stored id is the derived key itself, without any `~dupN` suffix.

Records are moved by identity; nothing is copied, dropped or duplicated.
"""

from typing import Any

from picocompat.contracts import LegacyEvent, PageIndexError, ParameterBundle, Ref
from picocompat.core.logging import get_logger
from picocompat.plugins.dispatcher import AliasDispatcher

logger = get_logger(__name__)

UNKNOWN_PAGE_ID = "~unknown"
DUPLICATE_MARKER = "~dup"

PageRecord = dict[str, Any]


def derive_page_id(url: str, base_url: str, url_rewriting: bool) -> str:
    """Derive a page key from a page URL.

    Args:
        url: Page URL
        base_url: Base URL all local pages live under
        url_rewriting: Whether URL rewriting is enabled

    Returns:
        Path of the URL relative to base_url, UNKNOWN_PAGE_ID for foreign URLs

    Examples:
        >>> derive_page_id("http://example.com/?sub/page", "http://example.com/", False)
        'sub/page'
        >>> derive_page_id("http://example.com/?sub/page", "http://example.com/", True)
        '?sub/page'
        >>> derive_page_id("http://other.org/page", "http://example.com/", False)
        '~unknown'
    """
    if not url.startswith(base_url):
        return UNKNOWN_PAGE_ID

    page_id = url[len(base_url) :]
    # Without URL rewriting pages are addressed as ?page
    if not url_rewriting and page_id.startswith("?"):
        page_id = page_id[1:]
    return page_id


def unique_key(candidate: str, taken: dict[str, Any]) -> str:
    """Return candidate, or candidate~dupN with the smallest free N."""
    key = candidate
    i = 1
    while key in taken:
        key = f"{candidate}{DUPLICATE_MARKER}{i}"
        i += 1
    return key


def rebuild_page_index(
    plain_pages: list[PageRecord],
    base_url: str,
    url_rewriting: bool,
) -> dict[str, PageRecord]:
    """Build a keyed page collection from a plain page list.

    Raises:
        PageIndexError: If a record has neither an `id` nor a `url`
    """
    pages: dict[str, PageRecord] = {}
    for position, page in enumerate(plain_pages):
        if page.get("id") is not None:
            candidate = str(page["id"])
        elif page.get("url") is not None:
            candidate = derive_page_id(page["url"], base_url, url_rewriting)
            # The record carries its id from now on, without any ~dupN suffix
            page["id"] = candidate
        else:
            raise PageIndexError(position)

        key = unique_key(candidate, pages)
        if key != candidate:
            logger.debug("Duplicate page key resolved", candidate=candidate, key=key)
        pages[key] = page
    return pages


def reindex_pages(
    pages: dict[str, PageRecord],
    dispatcher: AliasDispatcher,
    *,
    base_url: str,
    url_rewriting: bool,
    current_page: Ref[PageRecord | None] | None = None,
    previous_page: Ref[PageRecord | None] | None = None,
    next_page: Ref[PageRecord | None] | None = None,
) -> dict[str, PageRecord]:
    """Run the get_pages event over a keyed page collection.

    The navigation cells are passed through to legacy handlers as-is, so
    a handler replacing e.g. the current page is visible to the caller.

    Args:
        pages: Keyed page collection
        dispatcher: Dispatcher used to fire get_pages
        base_url: Base URL for key derivation
        url_rewriting: Whether URL rewriting is enabled
        current_page: Cell holding the page being served
        previous_page: Cell holding the previous page
        next_page: Cell holding the next page

    Returns:
        The rebuilt keyed collection

    Raises:
        PageIndexError: If a returned record has neither `id` nor `url`
    """
    plain_pages: Ref[list[PageRecord]] = Ref(list(pages.values()))

    bundle = ParameterBundle(
        [
            ("pages", plain_pages),
            ("current_page", current_page if current_page is not None else Ref(None)),
            ("previous_page", previous_page if previous_page is not None else Ref(None)),
            ("next_page", next_page if next_page is not None else Ref(None)),
        ]
    )
    dispatcher.trigger(LegacyEvent.GET_PAGES, bundle)

    return rebuild_page_index(plain_pages.value, base_url, url_rewriting)
