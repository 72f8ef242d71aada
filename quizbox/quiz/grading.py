"""
Answer grading.

Grading compares a user's answers against the correct answers shipped with
the quiz (as returned by GET /api/quizzes/<id>). It is a pure function of
(quiz, answers): nothing is stored and nothing is mutated.

Answers are keyed by question index:
- BOOLEAN: bool
- INPUT: str
- CHECKBOX: iterable of selected option indices
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from quizbox.quiz import QuestionType


@dataclass(frozen=True)
class QuestionResult:
    index: int
    correct: bool


@dataclass(frozen=True)
class QuizResult:
    questions: tuple
    correct: int
    total: int

    @property
    def fraction(self) -> str:
        return f"{self.correct}/{self.total}"

    @property
    def percentage(self) -> int:
        if not self.total:
            return 0
        # Half-up rounding; round() would send 50.5 to 50
        return int(self.correct * 100 / self.total + 0.5)

    def is_correct(self, index: int) -> bool:
        return self.questions[index].correct


def _normalize_text(value) -> str:
    return (value or "").strip().casefold()


def correct_option_indices(question: Mapping[str, Any]) -> set:
    return {
        index
        for index, option in enumerate(question.get('options') or [])
        if option.get('isCorrect')
    }


def is_answer_correct(question: Mapping[str, Any], answer: Optional[Any]) -> bool:
    """
    Check a single answer against a question.

    An unanswered question (answer is None) is always incorrect.
    """
    if answer is None:
        return False

    question_type = QuestionType.parse(question.get('type'))

    if question_type is QuestionType.BOOLEAN:
        return isinstance(answer, bool) and answer == question.get('correctAnswer')

    if question_type is QuestionType.INPUT:
        if not isinstance(answer, str):
            return False
        return _normalize_text(answer) == _normalize_text(question.get('correctText'))

    if question_type is QuestionType.CHECKBOX:
        if isinstance(answer, (str, bytes)):
            return False
        try:
            selected = set(answer)
        except TypeError:
            return False
        return selected == correct_option_indices(question)

    return False


def grade_quiz(quiz: Mapping[str, Any], answers: Mapping[int, Any]) -> QuizResult:
    """
    Grade every question of a quiz.

    Args:
        quiz: Quiz dict with a 'questions' list, correct answers included
        answers: Mapping of question index to the submitted answer

    Returns:
        QuizResult with per-question correctness and the aggregate score
    """
    questions = quiz.get('questions') or []
    results = tuple(
        QuestionResult(index=index, correct=is_answer_correct(question, answers.get(index)))
        for index, question in enumerate(questions)
    )
    return QuizResult(
        questions=results,
        correct=sum(1 for result in results if result.correct),
        total=len(results),
    )
