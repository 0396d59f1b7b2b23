# tests/contracts/test_signatures.py
"""Tests for the fixed event tables and enums."""

import pytest

from picocompat.contracts import (
    CANONICAL_SIGNATURES,
    EVENT_ALIASES,
    LEGACY_SIGNATURES,
    ApiRevision,
    CanonicalEvent,
    LegacyEvent,
)


class TestApiRevision:
    def test_ordering(self) -> None:
        assert ApiRevision.V0 < ApiRevision.V1 < ApiRevision.V2 < ApiRevision.V3

    def test_parse_int(self) -> None:
        assert ApiRevision.parse(1) is ApiRevision.V1

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported plugin API revision"):
            ApiRevision.parse(7)

    @pytest.mark.parametrize("value", [None, "one", object()])
    def test_parse_non_numeric_raises_value_error(self, value: object) -> None:
        with pytest.raises(ValueError, match="Unsupported plugin API revision"):
            ApiRevision.parse(value)  # type: ignore[arg-type]


class TestSignatureTables:
    """The tables are complete and fixed."""

    def test_every_canonical_event_has_signature(self) -> None:
        assert set(CANONICAL_SIGNATURES) == set(CanonicalEvent)

    def test_every_legacy_event_has_signature(self) -> None:
        assert set(LEGACY_SIGNATURES) == set(LegacyEvent)

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            EVENT_ALIASES[CanonicalEvent.ON_REQUEST_FILE] = (LegacyEvent.REQUEST_URL,)  # type: ignore[index]

    def test_alias_entries_non_empty_and_distinct(self) -> None:
        for legacy_events in EVENT_ALIASES.values():
            assert legacy_events
            assert len(set(legacy_events)) == len(legacy_events)

    def test_aliased_slots_exist_in_canonical_bundle(self) -> None:
        """Straight aliases reuse the canonical bundle, so every legacy slot must be there."""
        for canonical, legacy_events in EVENT_ALIASES.items():
            for legacy in legacy_events:
                assert set(LEGACY_SIGNATURES[legacy]) <= set(CANONICAL_SIGNATURES[canonical])

    def test_content_parsed_fires_two_events_in_order(self) -> None:
        assert EVENT_ALIASES[CanonicalEvent.ON_CONTENT_PARSED] == (
            LegacyEvent.AFTER_PARSE_CONTENT,
            LegacyEvent.CONTENT_PARSED,
        )

    @pytest.mark.parametrize(
        ("event", "arguments"),
        [
            (LegacyEvent.GET_PAGES, ("pages", "current_page", "previous_page", "next_page")),
            (LegacyEvent.BEFORE_RENDER, ("twig_variables", "twig", "template_name")),
            (LegacyEvent.AFTER_LOAD_CONTENT, ("file", "raw_content")),
            (LegacyEvent.GET_PAGE_DATA, ("page_data", "page_meta")),
            (LegacyEvent.PLUGINS_LOADED, ()),
        ],
    )
    def test_legacy_arity(self, event: LegacyEvent, arguments: tuple[str, ...]) -> None:
        assert LEGACY_SIGNATURES[event] == arguments
