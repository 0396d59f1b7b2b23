# src/picocompat/plugins/templates.py
"""Template name handling for the legacy before_render event.

Template names had no file extension in API v0. The extension is
stripped before before_render and put back afterwards. All templates of
one theme are assumed to share the same extension; a handler switching
to another template gets the original extension appended.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateName:
    """A template name split into its extension-less base and extension."""

    base: str
    extension: str

    def join(self, base: str | None = None) -> str:
        """Recompose a template name, optionally with a replaced base.

        The dot is always added, so an empty extension leaves a trailing
        dot: `index` comes back as `index.`.
        """
        name = self.base if base is None else base
        return f"{name}.{self.extension}"


def split_template_name(template_name: str) -> TemplateName:
    """Split off the extension of the last path component.

    Examples:
        >>> split_template_name("theme/index.twig")
        TemplateName(base='theme/index', extension='twig')
        >>> split_template_name("theme.d/index")
        TemplateName(base='theme.d/index', extension='')
    """
    head, sep, filename = template_name.rpartition("/")
    stem, dot, extension = filename.rpartition(".")
    # No dot, or a leading-dot name like ".hidden", has no extension
    if not dot or not stem:
        return TemplateName(base=template_name, extension="")
    return TemplateName(base=f"{head}{sep}{stem}", extension=extension)
