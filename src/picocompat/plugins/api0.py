# src/picocompat/plugins/api0.py
"""Compatibility plugin for plugins written against API version 0.

Implements every canonical hook. Most hooks are straight aliases and go
through the AliasDispatcher table; the rest reshape their parameters
before firing the legacy event:

- on_pages_loaded: keyed dict -> plain list -> get_pages -> keyed dict
- on_page_rendering: template extension stripped around before_render
- on_content_loaded / on_404_content_loaded: pass the stored request file
- on_single_page_loaded: page meta passed as a copy

Legacy events are offered to plugins declaring API v0 and API v1.
"""

from typing import Any, ClassVar

from picocompat.contracts import ApiRevision, CanonicalEvent, LegacyEvent, ParameterBundle, Ref
from picocompat.core.config import CompatSettings
from picocompat.core.constants import LegacyConstants, define_config_constants, get_constants
from picocompat.core.logging import get_logger
from picocompat.plugins.dispatcher import AliasDispatcher
from picocompat.plugins.hookspecs import hookimpl
from picocompat.plugins.pages import reindex_pages
from picocompat.plugins.registry import LegacyPluginRegistry
from picocompat.plugins.templates import split_template_name

logger = get_logger(__name__)


class PluginApi0Compat:
    """Maintains backward compatibility with API v0 plugins.

    Usage:
        registry = LegacyPluginRegistry()
        registry.register(SomeOldPlugin())

        manager = CompatManager()
        manager.register(PluginApi0Compat(settings, registry))
        manager.fire(CanonicalEvent.ON_CONTENT_PARSED, content="<p>Hi</p>")
    """

    name: ClassVar[str] = "PluginApi0Compat"

    # Compatibility plugins this one extends; resolved by the host loader
    depends_on: ClassVar[tuple[str, ...]] = ("PluginApi1Compat", "ThemeApi0Compat")

    # API this plugin is written against, and the API it emulates
    api_version: ClassVar[ApiRevision] = ApiRevision.V1
    api_version_support: ClassVar[ApiRevision] = ApiRevision.V0

    def __init__(
        self,
        settings: CompatSettings,
        registry: LegacyPluginRegistry,
        constants: LegacyConstants | None = None,
    ) -> None:
        self._settings = settings
        self._dispatcher = AliasDispatcher(registry)
        self._constants = constants if constants is not None else get_constants()
        self._request_file: Ref[str | None] = Ref(None)
        self.legacy_config: dict[str, Any] | None = None

    @property
    def dispatcher(self) -> AliasDispatcher:
        return self._dispatcher

    def trigger_event(self, event: LegacyEvent, bundle: ParameterBundle) -> None:
        """Fire a legacy event on all API v0 and v1 plugins."""
        self._dispatcher.trigger(event, bundle)

    # === Loading ===

    @hookimpl
    def on_plugins_loaded(self, bundle: ParameterBundle) -> None:
        self.trigger_event(LegacyEvent.PLUGINS_LOADED, ParameterBundle())

    @hookimpl
    def on_config_loaded(self, bundle: ParameterBundle) -> None:
        """Define legacy constants and keep the legacy config mirror.

        The mirror is only set once; later config loads do not replace it.
        """
        define_config_constants(self._constants, self._settings)
        if self.legacy_config is None:
            self.legacy_config = bundle.get("config")

        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_CONFIG_LOADED, bundle)

    @hookimpl
    def on_request_url(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_REQUEST_URL, bundle)

    @hookimpl
    def on_request_file(self, bundle: ParameterBundle) -> None:
        # Kept by reference for after_load_content and after_404_load_content
        self._request_file = bundle.ref("file")

    # === Content ===

    @hookimpl
    def on_content_loading(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_CONTENT_LOADING, bundle)

    @hookimpl
    def on_content_loaded(self, bundle: ParameterBundle) -> None:
        self.trigger_event(LegacyEvent.AFTER_LOAD_CONTENT, self._with_request_file(bundle))

    @hookimpl
    def on_404_content_loading(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_404_CONTENT_LOADING, bundle)

    @hookimpl
    def on_404_content_loaded(self, bundle: ParameterBundle) -> None:
        self.trigger_event(LegacyEvent.AFTER_404_LOAD_CONTENT, self._with_request_file(bundle))

    @hookimpl
    def on_meta_parsing(self, bundle: ParameterBundle) -> None:
        self.trigger_event(LegacyEvent.BEFORE_READ_FILE_META, bundle)

    @hookimpl
    def on_meta_parsed(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_META_PARSED, bundle)

    @hookimpl
    def on_content_parsing(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_CONTENT_PARSING, bundle)

    @hookimpl
    def on_content_parsed(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_CONTENT_PARSED, bundle)

    def _with_request_file(self, bundle: ParameterBundle) -> ParameterBundle:
        return ParameterBundle([("file", self._request_file), ("raw_content", bundle.ref("raw_content"))])

    # === Pages ===

    @hookimpl
    def on_single_page_loaded(self, bundle: ParameterBundle) -> None:
        """Trigger get_page_data with the page and a copy of its meta.

        API v0 handlers received the meta data by value, so changes to
        the second argument never reach the page.
        """
        page_data = bundle.ref("page_data")
        meta = page_data.value.get("meta") if page_data.value is not None else None
        legacy_bundle = ParameterBundle(
            [
                ("page_data", page_data),
                ("page_meta", Ref(dict(meta) if meta is not None else None)),
            ]
        )
        self.trigger_event(LegacyEvent.GET_PAGE_DATA, legacy_bundle)

    @hookimpl
    def on_pages_loaded(self, bundle: ParameterBundle) -> None:
        """Trigger get_pages with a plain list and re-index the result.

        The index is rebuilt from each page's `id`, or derived from its
        `url`. Pages with foreign URLs are indexed as `~unknown`;
        duplicates get `~dup1`, `~dup2`, ...
        """
        bundle.set(
            "pages",
            reindex_pages(
                bundle.get("pages"),
                self._dispatcher,
                base_url=self._settings.base_url,
                url_rewriting=self._settings.rewrite_url,
                current_page=bundle.ref("current_page"),
                previous_page=bundle.ref("previous_page"),
                next_page=bundle.ref("next_page"),
            ),
        )

    # === Rendering ===

    @hookimpl
    def on_twig_registration(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_TWIG_REGISTRATION, bundle)

    @hookimpl
    def on_page_rendering(self, bundle: ParameterBundle) -> None:
        """Trigger before_render with the template name minus its extension.

        The extension is re-added afterwards. All templates of a theme are
        assumed to use the same file extension.
        """
        template_name = bundle.ref("template_name")
        original = split_template_name(template_name.value)

        template_name.value = original.base
        self.trigger_event(LegacyEvent.BEFORE_RENDER, bundle)
        template_name.value = original.join(template_name.value)

    @hookimpl
    def on_page_rendered(self, bundle: ParameterBundle) -> None:
        self._dispatcher.dispatch_canonical(CanonicalEvent.ON_PAGE_RENDERED, bundle)

    # === Custom events ===

    @hookimpl
    def on_custom_event(self, event_name: str, bundle: ParameterBundle) -> None:
        # Custom events are never forwarded to API v0 plugins
        self._dispatcher.handle_custom_event(event_name, bundle)
