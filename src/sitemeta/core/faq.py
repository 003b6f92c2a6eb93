"""Schema.org FAQPage structured data."""

from dataclasses import dataclass, field

from sitemeta.core.render import generate_unique_key, json_ld_script
from sitemeta.core.types import SCHEMA_CONTEXT, compact, embedded

FAQ_PAGE_TYPE = "FAQPage"


@dataclass
class Answer:
    text: str = ""
    type: str = "Answer"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "Answer"

    def to_dict(self) -> dict[str, object]:
        return compact({"@type": self.type, "text": self.text})


@dataclass
class Question:
    """A question with its accepted answer."""

    name: str = ""
    accepted_answer: Answer | None = None
    type: str = "Question"

    def ensure_defaults(self) -> None:
        if not self.type:
            self.type = "Question"
        if self.accepted_answer is not None:
            self.accepted_answer.ensure_defaults()

    def to_dict(self) -> dict[str, object]:
        return compact(
            {
                "@type": self.type,
                "name": self.name,
                "acceptedAnswer": embedded(self.accepted_answer),
            },
        )


@dataclass
class FAQPage:
    """Schema.org FAQPage.

    See https://schema.org/FAQPage
    """

    main_entity: list[Question] = field(default_factory=list)
    context: str = SCHEMA_CONTEXT
    type: str = FAQ_PAGE_TYPE

    def ensure_defaults(self) -> None:
        if not self.context:
            self.context = SCHEMA_CONTEXT
        if not self.type:
            self.type = FAQ_PAGE_TYPE
        for question in self.main_entity:
            question.ensure_defaults()

    def validate(self) -> list[str]:
        """Return warnings for an empty page and incomplete questions.

        Questions are numbered from 1.
        """
        if not self.main_entity:
            return ["FAQPage should contain at least one question"]

        warnings: list[str] = []
        for i, question in enumerate(self.main_entity, start=1):
            if not question.name:
                warnings.append(f"Question {i} is missing a name")
            if question.accepted_answer is None:
                warnings.append(f"Question {i} is missing an accepted answer")
            elif not question.accepted_answer.text:
                warnings.append(f"Answer for question {i} is missing text")
        return warnings

    def to_dict(self) -> dict[str, object]:
        """Convert to JSON-LD dictionary, omitting an empty question list."""
        return compact(
            {
                "@context": self.context,
                "@type": self.type,
                "mainEntity": [question.to_dict() for question in self.main_entity],
            },
        )

    def to_json_ld(self) -> str:
        """Render as a JSON-LD script element."""
        self.ensure_defaults()
        return json_ld_script(f"faqpage-{generate_unique_key()}", self.to_dict())


def new_faq_page(questions: list[Question]) -> FAQPage:
    page = FAQPage(main_entity=questions)
    page.ensure_defaults()
    return page


def new_question(name: str, answer: Answer | None) -> Question:
    return Question(name=name, accepted_answer=answer)


def new_answer(text: str) -> Answer:
    return Answer(text=text)
