"""Core enumerations for the compatibility layer.

Event names are StrEnums so they can be used directly as attribute names
(legacy handlers, pluggy hooks) and compared against plain strings.
"""

from enum import IntEnum, StrEnum


class ApiRevision(IntEnum):
    """Plugin API revision a plugin declares support for.

    Ordering matters: legacy events are broadcast to plugins in ascending
    revision order.
    """

    V0 = 0
    V1 = 1
    V2 = 2
    V3 = 3

    @classmethod
    def parse(cls, value: "int | ApiRevision") -> "ApiRevision":
        """Coerce a declared API version into an ApiRevision.

        Raises:
            ValueError: If the value is not a known revision
        """
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"Unsupported plugin API revision: {value!r}") from None


class CanonicalEvent(StrEnum):
    """Lifecycle events fired by the host (API v1 calling convention)."""

    ON_PLUGINS_LOADED = "on_plugins_loaded"
    ON_CONFIG_LOADED = "on_config_loaded"
    ON_REQUEST_URL = "on_request_url"
    ON_REQUEST_FILE = "on_request_file"
    ON_CONTENT_LOADING = "on_content_loading"
    ON_CONTENT_LOADED = "on_content_loaded"
    ON_404_CONTENT_LOADING = "on_404_content_loading"
    ON_404_CONTENT_LOADED = "on_404_content_loaded"
    ON_META_PARSING = "on_meta_parsing"
    ON_META_PARSED = "on_meta_parsed"
    ON_CONTENT_PARSING = "on_content_parsing"
    ON_CONTENT_PARSED = "on_content_parsed"
    ON_SINGLE_PAGE_LOADED = "on_single_page_loaded"
    ON_PAGES_LOADED = "on_pages_loaded"
    ON_TWIG_REGISTRATION = "on_twig_registration"
    ON_PAGE_RENDERING = "on_page_rendering"
    ON_PAGE_RENDERED = "on_page_rendered"


class LegacyEvent(StrEnum):
    """Event handler names understood by API v0 plugins."""

    PLUGINS_LOADED = "plugins_loaded"
    CONFIG_LOADED = "config_loaded"
    REQUEST_URL = "request_url"
    BEFORE_LOAD_CONTENT = "before_load_content"
    AFTER_LOAD_CONTENT = "after_load_content"
    BEFORE_404_LOAD_CONTENT = "before_404_load_content"
    AFTER_404_LOAD_CONTENT = "after_404_load_content"
    BEFORE_READ_FILE_META = "before_read_file_meta"
    FILE_META = "file_meta"
    BEFORE_PARSE_CONTENT = "before_parse_content"
    AFTER_PARSE_CONTENT = "after_parse_content"
    CONTENT_PARSED = "content_parsed"
    GET_PAGE_DATA = "get_page_data"
    GET_PAGES = "get_pages"
    BEFORE_TWIG_REGISTER = "before_twig_register"
    BEFORE_RENDER = "before_render"
    AFTER_RENDER = "after_render"
