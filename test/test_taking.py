"""
Test cases for the quiz-taking view state.
"""
import pytest
from werkzeug.datastructures import MultiDict

from quizbox.quiz.errors import QuizStateError
from quizbox.quiz.taking import MAX_INPUT_ANSWER_LENGTH, Phase, TakingState, answers_from_form

QUIZ = {
    'id': 7,
    'title': 'Mixed',
    'createdAt': '2026-01-05T10:00:00.123456',
    'questions': [
        {'type': 'BOOLEAN', 'questionText': 'Q1', 'correctAnswer': True},
        {'type': 'INPUT', 'questionText': 'Q2', 'correctText': 'Paris'},
        {
            'type': 'CHECKBOX',
            'questionText': 'Q3',
            'options': [{'text': 'a', 'isCorrect': True}, {'text': 'b', 'isCorrect': False}],
        },
    ],
}


class TestTakingState:
    """Answering -> Submitted -> Answering."""

    def test_starts_answering_with_hidden_results(self):
        state = TakingState()
        state.record_answer(0, True)
        assert state.phase is Phase.ANSWERING
        assert state.grade(QUIZ) is None

    def test_submit_freezes_answers(self):
        state = TakingState()
        state.record_answer(0, True)
        state.submit()
        with pytest.raises(QuizStateError):
            state.record_answer(0, False)
        assert state.answers == {0: True}

    def test_submit_twice_rejected(self):
        state = TakingState()
        state.submit()
        with pytest.raises(QuizStateError):
            state.submit()

    def test_grade_after_submit(self):
        state = TakingState()
        state.record_answer(0, True)
        state.record_answer(1, 'paris')
        state.submit()
        result = state.grade(QUIZ)
        assert result.fraction == "2/3"

    def test_reset_clears_everything(self):
        state = TakingState()
        state.record_answer(0, True)
        state.toggle_answers()
        state.submit()
        state.reset()
        assert state.phase is Phase.ANSWERING
        assert state.answers == {}
        assert state.show_answers is False

    def test_show_answers_works_in_both_phases(self):
        state = TakingState()
        state.toggle_answers()
        assert state.show_answers is True
        state.submit()
        state.toggle_answers()
        assert state.show_answers is False
        assert state.phase is Phase.SUBMITTED

    def test_capture_replaces_answers_and_clears_missing(self):
        state = TakingState(answers={0: True, 1: 'Rome'})
        state.capture({1: 'Paris'}, question_count=3)
        assert state.answers == {1: 'Paris'}

    def test_capture_ignored_once_submitted(self):
        state = TakingState(answers={0: True})
        state.submit()
        state.capture({0: False}, question_count=3)
        assert state.answers == {0: True}

    def test_session_round_trip(self):
        state = TakingState()
        state.record_answer(0, False)
        state.record_answer(2, [1, 0])
        state.toggle_answers()
        state.submit()

        restored = TakingState.from_dict(state.to_dict())
        assert restored.phase is Phase.SUBMITTED
        assert restored.show_answers is True
        assert restored.answers == {0: False, 2: [1, 0]}

    def test_from_empty_session(self):
        state = TakingState.from_dict(None)
        assert state.phase is Phase.ANSWERING
        assert state.answers == {}

    def test_stamp_ties_state_to_one_quiz(self):
        state = TakingState.for_quiz(QUIZ)
        state.submit()
        restored = TakingState.from_dict(state.to_dict())

        assert restored.belongs_to(QUIZ)
        assert not restored.belongs_to(dict(QUIZ, createdAt='2026-02-01T08:30:00.000001'))

    def test_reset_keeps_stamp(self):
        state = TakingState.for_quiz(QUIZ)
        state.submit()
        state.reset()
        assert state.belongs_to(QUIZ)


class TestAnswersFromForm:
    """Reading the taking form."""

    def test_reads_every_type(self):
        form = MultiDict([('answer-0', 'false'), ('answer-1', ' Paris '), ('answer-2', '1'), ('answer-2', '0')])
        assert answers_from_form(QUIZ, form) == {0: False, 1: ' Paris ', 2: [1, 0]}

    def test_missing_fields_are_unanswered(self):
        assert answers_from_form(QUIZ, MultiDict()) == {}

    def test_ignores_out_of_range_and_junk_option_indices(self):
        form = MultiDict([('answer-2', '5'), ('answer-2', 'x'), ('answer-2', '0'), ('answer-2', '0')])
        assert answers_from_form(QUIZ, form) == {2: [0]}

    def test_empty_text_is_unanswered(self):
        assert answers_from_form(QUIZ, MultiDict([('answer-1', '')])) == {}

    def test_long_text_answer_is_truncated(self):
        form = MultiDict([('answer-1', 'x' * 8000)])
        answers = answers_from_form(QUIZ, form)
        assert answers[1] == 'x' * MAX_INPUT_ANSWER_LENGTH
