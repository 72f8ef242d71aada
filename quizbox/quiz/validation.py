"""
Pre-submit validation of a quiz being authored.

Checks run in a fixed order and stop at the first failure, so the author
always sees one message at a time.
"""
from typing import Optional

from quizbox.quiz import QuestionType

MSG_TITLE_REQUIRED = "Please enter a quiz title"
MSG_QUESTION_REQUIRED = "Please add at least one question"
MSG_QUESTION_TEXT_REQUIRED = "All questions must have text"
MSG_INPUT_ANSWER_REQUIRED = "All input questions must have a correct answer"
MSG_CHECKBOX_MIN_OPTIONS = "Checkbox questions must have at least 2 options"
MSG_CHECKBOX_CORRECT_REQUIRED = "Checkbox questions must have at least one correct answer"
MSG_OPTION_TEXT_REQUIRED = "All options must have text"


def _blank(value) -> bool:
    return not (value or "").strip()


def validate_question(question) -> Optional[str]:
    """Return the rejection reason for a single question draft, or None."""
    if _blank(question.question_text):
        return MSG_QUESTION_TEXT_REQUIRED

    if question.type is QuestionType.INPUT and _blank(question.correct_text):
        return MSG_INPUT_ANSWER_REQUIRED

    if question.type is QuestionType.CHECKBOX:
        options = question.options or []
        if len(options) < 2:
            return MSG_CHECKBOX_MIN_OPTIONS
        if not any(option.is_correct for option in options):
            return MSG_CHECKBOX_CORRECT_REQUIRED
        if any(_blank(option.text) for option in options):
            return MSG_OPTION_TEXT_REQUIRED

    # BOOLEAN needs nothing beyond its text; the answer defaults to False
    return None


def validate_quiz(title: str, questions: list) -> Optional[str]:
    """
    Validate a quiz before it is sent to the API.

    Args:
        title: Quiz title as typed by the author
        questions: Ordered list of QuestionDraft

    Returns:
        None if the quiz is valid, otherwise a human-readable reason
    """
    if _blank(title):
        return MSG_TITLE_REQUIRED

    if not questions:
        return MSG_QUESTION_REQUIRED

    for question in questions:
        error = validate_question(question)
        if error:
            return error

    return None
