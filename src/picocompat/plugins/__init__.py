"""Plugin layer: canonical hooks via pluggy, legacy dispatch, reshaping.

- Hookspecs: pluggy hook definitions for canonical host events
- Manager: host-facing registration and event firing
- Registry: loaded legacy plugins by API revision
- Dispatcher: canonical -> legacy alias broadcast
- Pages / Templates: parameter reshaping for get_pages and before_render
- PluginApi0Compat: the API v0 compatibility plugin
"""

from picocompat.plugins.api0 import PluginApi0Compat
from picocompat.plugins.dispatcher import TARGET_REVISIONS, AliasDispatcher
from picocompat.plugins.hookspecs import hookimpl, hookspec
from picocompat.plugins.manager import CompatManager, build_bundle
from picocompat.plugins.pages import (
    DUPLICATE_MARKER,
    UNKNOWN_PAGE_ID,
    derive_page_id,
    rebuild_page_index,
    reindex_pages,
)
from picocompat.plugins.registry import LegacyPluginHandle, LegacyPluginRegistry
from picocompat.plugins.templates import TemplateName, split_template_name

__all__ = [
    # Compatibility plugins
    "PluginApi0Compat",
    # Dispatch
    "AliasDispatcher",
    "TARGET_REVISIONS",
    # Manager
    "CompatManager",
    "build_bundle",
    # Registry
    "LegacyPluginHandle",
    "LegacyPluginRegistry",
    # Pages
    "DUPLICATE_MARKER",
    "UNKNOWN_PAGE_ID",
    "derive_page_id",
    "rebuild_page_index",
    "reindex_pages",
    # Templates
    "TemplateName",
    "split_template_name",
    # Hookspecs
    "hookimpl",
    "hookspec",
]
