"""
Test cases for quiz authoring validation.
"""
from quizbox.quiz import QuestionType
from quizbox.quiz.drafts import OptionDraft, QuestionDraft
from quizbox.quiz.validation import (
    MSG_CHECKBOX_CORRECT_REQUIRED,
    MSG_CHECKBOX_MIN_OPTIONS,
    MSG_INPUT_ANSWER_REQUIRED,
    MSG_OPTION_TEXT_REQUIRED,
    MSG_QUESTION_REQUIRED,
    MSG_QUESTION_TEXT_REQUIRED,
    MSG_TITLE_REQUIRED,
    validate_quiz,
)


def boolean_question(text="Is water wet?"):
    return QuestionDraft(QuestionType.BOOLEAN, question_text=text, correct_answer=False)


def checkbox_question(*options):
    return QuestionDraft(
        QuestionType.CHECKBOX,
        question_text="Pick the primes",
        options=[OptionDraft(text=text, is_correct=correct) for text, correct in options],
    )


class TestQuizLevelChecks:
    """Title and question presence."""

    def test_valid_quiz_passes(self):
        assert validate_quiz("Quiz", [boolean_question()]) is None

    def test_blank_title_rejected(self):
        assert validate_quiz("   ", [boolean_question()]) == MSG_TITLE_REQUIRED

    def test_no_questions_rejected(self):
        assert validate_quiz("Quiz", []) == MSG_QUESTION_REQUIRED

    def test_title_checked_before_questions(self):
        """With both problems present only the first one is reported."""
        assert validate_quiz("", []) == MSG_TITLE_REQUIRED


class TestQuestionChecks:
    """Per-question-type rules."""

    def test_blank_question_text_rejected(self):
        assert validate_quiz("Quiz", [boolean_question("  ")]) == MSG_QUESTION_TEXT_REQUIRED

    def test_boolean_default_answer_is_valid(self):
        draft = QuestionDraft.new(QuestionType.BOOLEAN)
        draft.question_text = "Is the sky blue?"
        assert draft.correct_answer is False
        assert validate_quiz("Quiz", [draft]) is None

    def test_input_requires_correct_text(self):
        draft = QuestionDraft(QuestionType.INPUT, question_text="Capital of France?", correct_text="  ")
        assert validate_quiz("Quiz", [draft]) == MSG_INPUT_ANSWER_REQUIRED

    def test_input_with_answer_is_valid(self):
        draft = QuestionDraft(QuestionType.INPUT, question_text="Capital of France?", correct_text="Paris")
        assert validate_quiz("Quiz", [draft]) is None

    def test_checkbox_with_single_option_rejected(self):
        assert validate_quiz("Quiz", [checkbox_question(("2", True))]) == MSG_CHECKBOX_MIN_OPTIONS

    def test_checkbox_without_correct_option_rejected(self):
        question = checkbox_question(("4", False), ("6", False))
        assert validate_quiz("Quiz", [question]) == MSG_CHECKBOX_CORRECT_REQUIRED

    def test_checkbox_with_blank_option_rejected(self):
        question = checkbox_question(("2", True), (" ", False))
        assert validate_quiz("Quiz", [question]) == MSG_OPTION_TEXT_REQUIRED

    def test_checkbox_with_several_correct_options_is_valid(self):
        question = checkbox_question(("2", True), ("3", True), ("4", False))
        assert validate_quiz("Quiz", [question]) is None

    def test_first_failing_question_wins(self):
        questions = [
            boolean_question(),
            QuestionDraft(QuestionType.INPUT, question_text="Q", correct_text=""),
            checkbox_question(("only", True)),
        ]
        assert validate_quiz("Quiz", questions) == MSG_INPUT_ANSWER_REQUIRED
