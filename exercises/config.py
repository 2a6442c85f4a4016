"""Configuration for Mega Test validation.

A composition lists the sections a generated test must contain, how many
validated questions each needs, and which reading passage (if any) the
section depends on. Two compositions exist: the canonical 7-section test and
the earlier rewrite-heavy test.
"""

from pydantic import BaseModel, Field, computed_field

from exercises.messages import DEFAULT_LOCALE, Locale


class SectionRequirement(BaseModel):
    """One section of a test composition."""

    section: str
    minimum: int = Field(ge=1)
    passage_key: str | None = None


class MegaTestConfig(BaseModel):
    """Master configuration for validating and scoring a test."""

    sections: list[SectionRequirement] = Field(min_length=1)
    locale: Locale = DEFAULT_LOCALE

    @computed_field
    @property
    def total_questions(self) -> int:
        return sum(req.minimum for req in self.sections)

    def required_passages(self) -> list[tuple[str, str]]:
        """Return (passage_key, section) pairs in composition order, one per passage."""
        seen: set[str] = set()
        passages = []
        for req in self.sections:
            if req.passage_key and req.passage_key not in seen:
                seen.add(req.passage_key)
                passages.append((req.passage_key, req.section))
        return passages

    def with_locale(self, locale: Locale) -> "MegaTestConfig":
        return self.model_copy(update={"locale": locale})


MEGA_TEST_50 = MegaTestConfig(
    sections=[
        SectionRequirement(section="multiple_choice", minimum=10),
        SectionRequirement(section="fill_blank", minimum=10),
        SectionRequirement(section="scramble", minimum=10),
        SectionRequirement(section="rewrite", minimum=5),
        SectionRequirement(section="reading", minimum=5, passage_key="passage"),
        SectionRequirement(
            section="true_false", minimum=5, passage_key="true_false_passage"
        ),
        SectionRequirement(section="fill_box", minimum=5),
    ]
)

REWRITE_TEST_50 = MegaTestConfig(
    sections=[
        SectionRequirement(section="rewrite", minimum=40),
        SectionRequirement(section="reading", minimum=5, passage_key="passage"),
        SectionRequirement(section="pronunciation", minimum=5),
    ]
)

COMPOSITIONS = {
    "mega": MEGA_TEST_50,
    "rewrite": REWRITE_TEST_50,
}
