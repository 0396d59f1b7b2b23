"""Fixed event signatures and the canonical-to-legacy alias table.

These tables ARE the compatibility contract. Legacy plugins receive
their arguments positionally, so the slot order of every legacy
signature must never change.
"""

from collections.abc import Mapping
from types import MappingProxyType

from picocompat.contracts.enums import CanonicalEvent, LegacyEvent

# Slot names of each canonical bundle, in host calling order
CANONICAL_SIGNATURES: Mapping[CanonicalEvent, tuple[str, ...]] = MappingProxyType(
    {
        CanonicalEvent.ON_PLUGINS_LOADED: ("plugins",),
        CanonicalEvent.ON_CONFIG_LOADED: ("config",),
        CanonicalEvent.ON_REQUEST_URL: ("url",),
        CanonicalEvent.ON_REQUEST_FILE: ("file",),
        CanonicalEvent.ON_CONTENT_LOADING: ("file",),
        CanonicalEvent.ON_CONTENT_LOADED: ("raw_content",),
        CanonicalEvent.ON_404_CONTENT_LOADING: ("file",),
        CanonicalEvent.ON_404_CONTENT_LOADED: ("raw_content",),
        CanonicalEvent.ON_META_PARSING: ("raw_content", "headers"),
        CanonicalEvent.ON_META_PARSED: ("meta",),
        CanonicalEvent.ON_CONTENT_PARSING: ("raw_content",),
        CanonicalEvent.ON_CONTENT_PARSED: ("content",),
        CanonicalEvent.ON_SINGLE_PAGE_LOADED: ("page_data",),
        CanonicalEvent.ON_PAGES_LOADED: ("pages", "current_page", "previous_page", "next_page"),
        CanonicalEvent.ON_TWIG_REGISTRATION: (),
        CanonicalEvent.ON_PAGE_RENDERING: ("twig", "twig_variables", "template_name"),
        CanonicalEvent.ON_PAGE_RENDERED: ("output",),
    }
)

# Positional arguments each legacy handler receives
LEGACY_SIGNATURES: Mapping[LegacyEvent, tuple[str, ...]] = MappingProxyType(
    {
        LegacyEvent.PLUGINS_LOADED: (),
        LegacyEvent.CONFIG_LOADED: ("config",),
        LegacyEvent.REQUEST_URL: ("url",),
        LegacyEvent.BEFORE_LOAD_CONTENT: ("file",),
        LegacyEvent.AFTER_LOAD_CONTENT: ("file", "raw_content"),
        LegacyEvent.BEFORE_404_LOAD_CONTENT: ("file",),
        LegacyEvent.AFTER_404_LOAD_CONTENT: ("file", "raw_content"),
        LegacyEvent.BEFORE_READ_FILE_META: ("headers",),
        LegacyEvent.FILE_META: ("meta",),
        LegacyEvent.BEFORE_PARSE_CONTENT: ("raw_content",),
        LegacyEvent.AFTER_PARSE_CONTENT: ("content",),
        LegacyEvent.CONTENT_PARSED: ("content",),
        LegacyEvent.GET_PAGE_DATA: ("page_data", "page_meta"),
        LegacyEvent.GET_PAGES: ("pages", "current_page", "previous_page", "next_page"),
        LegacyEvent.BEFORE_TWIG_REGISTER: (),
        LegacyEvent.BEFORE_RENDER: ("twig_variables", "twig", "template_name"),
        LegacyEvent.AFTER_RENDER: ("output",),
    }
)

# Canonical events re-broadcast verbatim under their legacy names.
# Events that need reshaping (pages, templates, stored request file) are
# handled by the API v0 plugin itself and have no entry here.
EVENT_ALIASES: Mapping[CanonicalEvent, tuple[LegacyEvent, ...]] = MappingProxyType(
    {
        CanonicalEvent.ON_CONFIG_LOADED: (LegacyEvent.CONFIG_LOADED,),
        CanonicalEvent.ON_REQUEST_URL: (LegacyEvent.REQUEST_URL,),
        CanonicalEvent.ON_CONTENT_LOADING: (LegacyEvent.BEFORE_LOAD_CONTENT,),
        CanonicalEvent.ON_404_CONTENT_LOADING: (LegacyEvent.BEFORE_404_LOAD_CONTENT,),
        CanonicalEvent.ON_META_PARSED: (LegacyEvent.FILE_META,),
        CanonicalEvent.ON_CONTENT_PARSING: (LegacyEvent.BEFORE_PARSE_CONTENT,),
        CanonicalEvent.ON_CONTENT_PARSED: (LegacyEvent.AFTER_PARSE_CONTENT, LegacyEvent.CONTENT_PARSED),
        CanonicalEvent.ON_TWIG_REGISTRATION: (LegacyEvent.BEFORE_TWIG_REGISTER,),
        CanonicalEvent.ON_PAGE_RENDERED: (LegacyEvent.AFTER_RENDER,),
    }
)
