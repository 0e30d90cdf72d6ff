"""Language tags of the form ``language[-region[-variant]]``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from s2common.exceptions import BadFormatError

MAX_SUBTAGS = 3


class LanguageTag(BaseModel):
    """An immutable language / region / variant triple.

    Identity is the canonical text form; ``locale`` is a derived platform
    locale name used only for collation and formatting.
    """

    model_config = ConfigDict(frozen=True)

    language: str
    region: str = ""
    variant: str = ""

    @classmethod
    def parse(cls, tag: str) -> LanguageTag:
        """Parse ``language``, ``language-region`` or ``language-region-variant``.

        Raises
        ------
        BadFormatError
            If the tag has more than three subtags or an empty one.
        """
        parts = tag.split("-")
        if len(parts) > MAX_SUBTAGS:
            raise BadFormatError(
                "Language tag is of format language-region-variant e.g. en-GB"
            )
        if not all(parts):
            raise BadFormatError(f"Language tag {tag!r} has an empty subtag")
        return cls.from_parts(*parts)

    @classmethod
    def from_parts(cls, language: str, region: str = "", variant: str = "") -> LanguageTag:
        """Build a tag directly from trusted subtags.

        Subtags must not contain ``-`` so that equal canonical text always
        means equal tags.
        """
        if not language:
            raise ValueError("A language subtag is required")
        if variant and not region:
            raise ValueError("A variant requires a region")
        if any("-" in p for p in (language, region, variant)):
            raise ValueError("Subtags must not contain '-'")
        return cls(language=language, region=region, variant=variant)

    def canonical_text(self) -> str:
        """Rebuild the dash-joined form from the stored subtags."""
        if self.variant:
            return f"{self.language}-{self.region}-{self.variant}"
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    @property
    def locale(self) -> str:
        """Platform locale name, e.g. ``en_GB`` or ``en_GB_POSIX``."""
        return "_".join(p for p in (self.language, self.region, self.variant) if p)

    def __str__(self) -> str:
        return self.canonical_text()


SYSTEM_LANGUAGE = LanguageTag.parse("en")
