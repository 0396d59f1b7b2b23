# tests/conftest.py
"""Shared test fixtures.

Legacy plugins are plain objects whose handler methods are found by
name, so tests build them on the fly with `legacy_plugin_factory`:

    def test_something(legacy_plugin_factory, call_log):
        plugin = legacy_plugin_factory("A", ["content_parsed"])
        ...
        assert call_log == [("A", "content_parsed", ("<p>x</p>",))]

Each recorded call stores the plugin name, the legacy event and the
argument VALUES at call time (cells are unwrapped).
"""

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from picocompat.contracts import ApiRevision, Ref
from picocompat.core.config import CompatSettings
from picocompat.core.constants import LegacyConstants
from picocompat.plugins.api0 import PluginApi0Compat
from picocompat.plugins.dispatcher import AliasDispatcher
from picocompat.plugins.manager import CompatManager
from picocompat.plugins.registry import LegacyPluginRegistry

CallLog = list[tuple[str, str, tuple[Any, ...]]]
LegacyPluginFactory = Callable[..., Any]


@pytest.fixture
def settings() -> CompatSettings:
    return CompatSettings(
        root_dir="/srv/site/",
        config_dir="/srv/site/config/",
        plugins_dir="/srv/site/plugins/",
        themes_dir="/srv/site/themes/",
        content_dir="/srv/site/content/",
        content_ext=".md",
        base_url="http://example.com/",
        rewrite_url=False,
        lib_dir="/srv/site/lib/",
        twig_config={"cache": "/srv/site/cache/"},
    )


@pytest.fixture
def registry() -> LegacyPluginRegistry:
    return LegacyPluginRegistry()


@pytest.fixture
def constants() -> LegacyConstants:
    return LegacyConstants()


@pytest.fixture
def dispatcher(registry: LegacyPluginRegistry) -> AliasDispatcher:
    return AliasDispatcher(registry)


@pytest.fixture
def call_log() -> CallLog:
    return []


@pytest.fixture
def legacy_plugin_factory(registry: LegacyPluginRegistry, call_log: CallLog) -> LegacyPluginFactory:
    """Build a recording legacy plugin and register it.

    Args (of the returned factory):
        name: Plugin (and class) name
        events: Legacy handler names to implement
        revision: Declared API revision (None registers without one)
        side_effects: Optional per-event callables run with the raw cells
    """

    def factory(
        name: str,
        events: Iterable[str],
        revision: ApiRevision | int | None = ApiRevision.V0,
        side_effects: dict[str, Callable[..., None]] | None = None,
    ) -> Any:
        effects = side_effects or {}

        def make_handler(event: str) -> Callable[..., None]:
            def handler(self: Any, *args: Ref[Any]) -> None:
                call_log.append((name, event, tuple(arg.value for arg in args)))
                if event in effects:
                    effects[event](*args)

            return handler

        namespace: dict[str, Any] = {str(event): make_handler(str(event)) for event in events}
        plugin = type(name, (), namespace)()
        registry.register(plugin, name=name, revision=revision)
        return plugin

    return factory


@pytest.fixture
def api0_plugin(settings: CompatSettings, registry: LegacyPluginRegistry, constants: LegacyConstants) -> PluginApi0Compat:
    return PluginApi0Compat(settings, registry, constants)


@pytest.fixture
def manager(api0_plugin: PluginApi0Compat) -> CompatManager:
    compat_manager = CompatManager()
    compat_manager.register(api0_plugin)
    return compat_manager
