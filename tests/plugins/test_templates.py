# tests/plugins/test_templates.py
"""Tests for template name extension handling."""

import pytest

from picocompat.plugins.templates import TemplateName, split_template_name


class TestSplitTemplateName:
    @pytest.mark.parametrize(
        ("name", "base", "extension"),
        [
            ("theme/index.twig", "theme/index", "twig"),
            ("index.twig", "index", "twig"),
            ("index.html.twig", "index.html", "twig"),
            ("theme.d/index", "theme.d/index", ""),
            ("index", "index", ""),
            ("theme/.hidden", "theme/.hidden", ""),
        ],
    )
    def test_split(self, name: str, base: str, extension: str) -> None:
        assert split_template_name(name) == TemplateName(base=base, extension=extension)


class TestJoin:
    def test_unchanged_base_round_trips(self) -> None:
        assert split_template_name("theme/index.twig").join() == "theme/index.twig"

    def test_replaced_base_keeps_extension(self) -> None:
        assert split_template_name("theme/index.twig").join("custom") == "custom.twig"

    def test_no_extension_leaves_trailing_dot(self) -> None:
        assert split_template_name("index").join() == "index."
        assert split_template_name("index").join("custom") == "custom."

    def test_directory_without_extension(self) -> None:
        assert split_template_name("theme.d/index").join() == "theme.d/index."
