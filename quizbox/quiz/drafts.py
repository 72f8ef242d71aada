"""
Unsaved questions and options as edited in the authoring form.

Drafts travel in three shapes:
- the REST payload (camelCase JSON, see to_payload/from_payload)
- flat HTML form fields, e.g. questions-0-text, questions-0-options-1-is_correct
- these dataclasses, which the validator works on
"""
import re
from dataclasses import dataclass, field
from typing import Optional

from quizbox.quiz import QuestionType

_QUESTION_FIELD = re.compile(r"^questions-(\d+)-type$")
_OPTION_FIELD = re.compile(r"^questions-(\d+)-options-(\d+)-text$")


@dataclass
class OptionDraft:
    text: str = ""
    is_correct: bool = False

    def to_payload(self) -> dict:
        return {'text': self.text, 'isCorrect': self.is_correct}


@dataclass
class QuestionDraft:
    type: QuestionType
    question_text: str = ""
    correct_answer: Optional[bool] = None
    correct_text: Optional[str] = None
    options: list = field(default_factory=list)

    @classmethod
    def new(cls, question_type: QuestionType) -> "QuestionDraft":
        """Blank draft with the defaults the authoring form starts from."""
        if question_type is QuestionType.BOOLEAN:
            return cls(question_type, correct_answer=False)
        if question_type is QuestionType.INPUT:
            return cls(question_type, correct_text="")
        return cls(question_type, options=[OptionDraft()])

    @classmethod
    def from_payload(cls, data: dict) -> "QuestionDraft":
        options = [
            OptionDraft(text=opt.get('text') or '', is_correct=bool(opt.get('isCorrect', False)))
            for opt in (data.get('options') or [])
        ]
        return cls(
            type=QuestionType(data['type']),
            question_text=data.get('questionText') or '',
            correct_answer=data.get('correctAnswer'),
            correct_text=data.get('correctText'),
            options=options,
        )

    def to_payload(self) -> dict:
        payload = {
            'type': self.type.value,
            'questionText': self.question_text,
        }
        if self.type is QuestionType.BOOLEAN:
            payload['correctAnswer'] = bool(self.correct_answer)
        elif self.type is QuestionType.INPUT:
            payload['correctText'] = self.correct_text or ''
        else:
            payload['options'] = [option.to_payload() for option in self.options]
        return payload


def drafts_from_form(form) -> list:
    """
    Rebuild the ordered question drafts from a submitted authoring form.

    Field indices only need to be increasing, gaps are fine. Unknown
    question types are skipped.
    """
    question_indices = sorted(
        int(match.group(1))
        for match in (_QUESTION_FIELD.match(key) for key in form.keys())
        if match
    )

    drafts = []
    for qi in question_indices:
        prefix = f"questions-{qi}-"
        question_type = QuestionType.parse(form.get(prefix + "type"))
        if question_type is None:
            continue

        draft = QuestionDraft(question_type, question_text=form.get(prefix + "text", ""))
        if question_type is QuestionType.BOOLEAN:
            draft.correct_answer = form.get(prefix + "correct_answer") == "true"
        elif question_type is QuestionType.INPUT:
            draft.correct_text = form.get(prefix + "correct_text", "")
        else:
            option_indices = sorted(
                int(match.group(2))
                for match in (_OPTION_FIELD.match(key) for key in form.keys())
                if match and int(match.group(1)) == qi
            )
            draft.options = [
                OptionDraft(
                    text=form.get(f"{prefix}options-{oi}-text", ""),
                    is_correct=bool(form.get(f"{prefix}options-{oi}-is_correct")),
                )
                for oi in option_indices
            ]
        drafts.append(draft)
    return drafts
