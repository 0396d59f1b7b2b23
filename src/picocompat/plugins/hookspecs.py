# src/picocompat/plugins/hookspecs.py
"""pluggy hook specifications for canonical host events.

The host fires one hook per lifecycle event. Every hook receives a single
ParameterBundle whose slots follow CANONICAL_SIGNATURES; implementations
communicate back to the host only by mutating those slots.

Usage (implementing a compatibility plugin):
    from picocompat.plugins.hookspecs import hookimpl

    class MyCompatPlugin:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def on_content_parsed(self, bundle):
            ...

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks plugin implementations of those hooks.
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from picocompat.contracts import ParameterBundle

# Project name for pluggy
PROJECT_NAME = "picocompat"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for plugins to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LoadingSpec:
    """Hooks fired while the host boots and resolves the request."""

    @hookspec
    def on_plugins_loaded(self, bundle: "ParameterBundle") -> None:
        """All plugins are loaded. Slots: plugins."""

    @hookspec
    def on_config_loaded(self, bundle: "ParameterBundle") -> None:
        """Configuration is loaded. Slots: config."""

    @hookspec
    def on_request_url(self, bundle: "ParameterBundle") -> None:
        """Request URL is known. Slots: url."""

    @hookspec
    def on_request_file(self, bundle: "ParameterBundle") -> None:
        """Content file serving the request is known. Slots: file."""


class ContentSpec:
    """Hooks fired while loading and parsing the requested content."""

    @hookspec
    def on_content_loading(self, bundle: "ParameterBundle") -> None:
        """Slots: file."""

    @hookspec
    def on_content_loaded(self, bundle: "ParameterBundle") -> None:
        """Slots: raw_content."""

    @hookspec
    def on_404_content_loading(self, bundle: "ParameterBundle") -> None:
        """Slots: file."""

    @hookspec
    def on_404_content_loaded(self, bundle: "ParameterBundle") -> None:
        """Slots: raw_content."""

    @hookspec
    def on_meta_parsing(self, bundle: "ParameterBundle") -> None:
        """Slots: raw_content, headers."""

    @hookspec
    def on_meta_parsed(self, bundle: "ParameterBundle") -> None:
        """Slots: meta."""

    @hookspec
    def on_content_parsing(self, bundle: "ParameterBundle") -> None:
        """Slots: raw_content."""

    @hookspec
    def on_content_parsed(self, bundle: "ParameterBundle") -> None:
        """Slots: content."""


class PagesSpec:
    """Hooks fired while building the page collection."""

    @hookspec
    def on_single_page_loaded(self, bundle: "ParameterBundle") -> None:
        """Slots: page_data."""

    @hookspec
    def on_pages_loaded(self, bundle: "ParameterBundle") -> None:
        """Slots: pages, current_page, previous_page, next_page.

        `pages` holds a dict mapping unique page id to page record.
        """


class RenderSpec:
    """Hooks fired around template rendering."""

    @hookspec
    def on_twig_registration(self, bundle: "ParameterBundle") -> None:
        """Template engine is being set up. No slots."""

    @hookspec
    def on_page_rendering(self, bundle: "ParameterBundle") -> None:
        """Slots: twig, twig_variables, template_name."""

    @hookspec
    def on_page_rendered(self, bundle: "ParameterBundle") -> None:
        """Slots: output."""


class CustomEventSpec:
    """Hook for events outside the fixed lifecycle."""

    @hookspec
    def on_custom_event(self, event_name: str, bundle: "ParameterBundle") -> None:
        """A plugin asked to broadcast an arbitrary event by name."""
