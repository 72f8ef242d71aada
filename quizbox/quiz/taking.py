"""
View state of a quiz being taken.

ANSWERING -> SUBMITTED on submit, back to ANSWERING on reset. Showing the
correct answers is a separate toggle that works in either phase. The state
is kept in the browser session, so to_dict/from_dict must round-trip
through JSON. The quiz stamp (its creation time) ties a stored state to one
quiz, so a state left behind by a deleted quiz is never applied to a new
quiz that reuses its id.
"""
import enum
from typing import Any, Optional

from quizbox.quiz import QuestionType
from quizbox.quiz.errors import QuizStateError
from quizbox.quiz.grading import QuizResult, grade_quiz

MAX_INPUT_ANSWER_LENGTH = 500


class Phase(str, enum.Enum):
    ANSWERING = "answering"
    SUBMITTED = "submitted"


class TakingState:
    """Answers, phase and show-answers toggle for one quiz."""

    def __init__(self, phase: Phase = Phase.ANSWERING, show_answers: bool = False, answers: Optional[dict] = None,
                 quiz_stamp: Optional[str] = None):
        self.phase = phase
        self.show_answers = show_answers
        self.answers = dict(answers or {})
        self.quiz_stamp = quiz_stamp

    @classmethod
    def for_quiz(cls, quiz: dict) -> "TakingState":
        return cls(quiz_stamp=quiz.get('createdAt'))

    def belongs_to(self, quiz: dict) -> bool:
        return self.quiz_stamp == quiz.get('createdAt')

    def __repr__(self) -> str:
        return f"<TakingState {self.phase.value}, {len(self.answers)} answers>"

    @property
    def submitted(self) -> bool:
        return self.phase is Phase.SUBMITTED

    def _require_answering(self):
        if self.submitted:
            raise QuizStateError("Quiz already submitted; reset it to answer again")

    def record_answer(self, index: int, value: Any):
        """Set (or with None, clear) the answer for one question."""
        self._require_answering()
        if value is None:
            self.answers.pop(index, None)
        else:
            self.answers[index] = value

    def capture(self, answers: dict, question_count: int):
        """Take the answers of a whole taking form; a no-op once submitted."""
        if self.submitted:
            return
        for index in range(question_count):
            self.record_answer(index, answers.get(index))

    def submit(self):
        self._require_answering()
        self.phase = Phase.SUBMITTED

    def reset(self):
        self.phase = Phase.ANSWERING
        self.show_answers = False
        self.answers = {}

    def toggle_answers(self):
        self.show_answers = not self.show_answers

    def grade(self, quiz: dict) -> Optional[QuizResult]:
        """Grade the answers once submitted; correctness stays hidden before that."""
        if not self.submitted:
            return None
        return grade_quiz(quiz, self.answers)

    def to_dict(self) -> dict:
        return {
            'phase': self.phase.value,
            'show_answers': self.show_answers,
            'answers': {str(index): value for index, value in self.answers.items()},
            'quiz': self.quiz_stamp,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "TakingState":
        if not data:
            return cls()
        try:
            phase = Phase(data.get('phase'))
        except ValueError:
            phase = Phase.ANSWERING
        answers = {}
        for key, value in (data.get('answers') or {}).items():
            try:
                answers[int(key)] = value
            except (TypeError, ValueError):
                continue
        return cls(phase=phase, show_answers=bool(data.get('show_answers')), answers=answers,
                   quiz_stamp=data.get('quiz'))


def answers_from_form(quiz: dict, form) -> dict:
    """
    Read answers for every question of a quiz from the taking form.

    Fields are answer-<i> for BOOLEAN ("true"/"false") and INPUT, and a
    repeated answer-<i> with option indices for CHECKBOX. Questions with no
    field submitted are left out (unanswered).
    """
    answers = {}
    for index, question in enumerate(quiz.get('questions') or []):
        key = f"answer-{index}"
        question_type = QuestionType.parse(question.get('type'))

        if question_type is QuestionType.CHECKBOX:
            option_count = len(question.get('options') or [])
            selected = []
            for raw in form.getlist(key):
                try:
                    option_index = int(raw)
                except ValueError:
                    continue
                if 0 <= option_index < option_count and option_index not in selected:
                    selected.append(option_index)
            if selected:
                answers[index] = selected
            continue

        if key not in form:
            continue
        raw = form.get(key)
        if question_type is QuestionType.BOOLEAN:
            if raw in ("true", "false"):
                answers[index] = raw == "true"
        elif question_type is QuestionType.INPUT:
            # An emptied text box counts as unanswered
            if raw:
                answers[index] = raw[:MAX_INPUT_ANSWER_LENGTH]
    return answers
