"""
Browser routes.

Every page talks to the REST API through QuizApiClient. Grading happens
here, from answers kept in the session cookie; nothing about a quiz
attempt is sent back to the API.
"""
from flask import render_template, request, redirect, url_for, flash, session, current_app
from quizbox.client import QuizApiClient, QuizApiError
from quizbox.quiz import QuestionType
from quizbox.quiz.drafts import OptionDraft, QuestionDraft, drafts_from_form
from quizbox.quiz.errors import QuizStateError
from quizbox.quiz.taking import TakingState, answers_from_form
from quizbox.quiz.validation import validate_quiz
from quizbox.web import web_bp

TAKING_SESSION_KEY = 'taking'


def _load_state(quiz_id: int, quiz: dict) -> TakingState:
    state = TakingState.from_dict(session.get(TAKING_SESSION_KEY, {}).get(str(quiz_id)))
    if not state.belongs_to(quiz):
        # Left over from a deleted quiz whose id was handed out again
        return TakingState.for_quiz(quiz)
    return state


def _save_state(quiz_id: int, state: TakingState):
    # Only the quiz being taken is kept
    session[TAKING_SESSION_KEY] = {str(quiz_id): state.to_dict()}


def _forget_state(quiz_id: int):
    states = dict(session.get(TAKING_SESSION_KEY, {}))
    if states.pop(str(quiz_id), None) is not None:
        session[TAKING_SESSION_KEY] = states


@web_bp.route('/quizzes')
def quiz_list():
    quizzes = []
    error = None
    with QuizApiClient.from_app() as client:
        try:
            quizzes = client.list_quizzes()
        except QuizApiError as e:
            error = str(e)
    return render_template('quiz_list.html', quizzes=quizzes, error=error)


@web_bp.route('/quizzes/<int:quiz_id>/delete', methods=['POST'])
def delete_quiz(quiz_id):
    with QuizApiClient.from_app() as client:
        try:
            client.delete_quiz(quiz_id)
        except QuizApiError as e:
            flash(str(e), 'error')
        else:
            _forget_state(quiz_id)
            flash('Quiz deleted.', 'info')
    return redirect(url_for('web.quiz_list'))


def _apply_authoring_action(action: str, drafts: list):
    """Edit the draft list in place for an add/remove button press."""
    name, _, arg = action.partition(':')
    try:
        if name == 'add':
            question_type = QuestionType.parse(arg)
            if question_type is not None:
                drafts.append(QuestionDraft.new(question_type))
        elif name == 'remove':
            drafts.pop(int(arg))
        elif name == 'add_option':
            drafts[int(arg)].options.append(OptionDraft())
        elif name == 'remove_option':
            qi, _, oi = arg.partition(':')
            drafts[int(qi)].options.pop(int(oi))
    except (ValueError, IndexError):
        current_app.logger.warning(f"Ignoring malformed authoring action: {action}")


@web_bp.route('/create', methods=['GET', 'POST'])
def create_quiz():
    """
    Quiz authoring form.

    The whole draft round-trips through the form on every button press;
    only the submit action validates and calls the API.
    """
    if request.method == 'GET':
        return render_template('create_quiz.html', title='', description='', drafts=[], error=None)

    title = request.form.get('title', '')
    description = request.form.get('description', '')
    drafts = drafts_from_form(request.form)
    action = request.form.get('action', 'submit')
    error = None

    if action != 'submit':
        _apply_authoring_action(action, drafts)
    else:
        error = validate_quiz(title, drafts)
        if error is None:
            with QuizApiClient.from_app() as client:
                try:
                    client.create_quiz(title, description, [draft.to_payload() for draft in drafts])
                except QuizApiError as e:
                    error = str(e)
                else:
                    flash('Quiz created.', 'info')
                    return redirect(url_for('web.quiz_list'))

    status = 400 if error else 200
    return render_template(
        'create_quiz.html', title=title, description=description, drafts=drafts, error=error
    ), status


@web_bp.route('/quizzes/<int:quiz_id>', methods=['GET', 'POST'])
def quiz_detail(quiz_id):
    """
    Take a quiz.

    POST actions: answer (keep answers), submit, reset, toggle_answers.
    Each POST redirects back here so reloading never resubmits.
    """
    with QuizApiClient.from_app() as client:
        try:
            quiz = client.get_quiz(quiz_id)
        except QuizApiError as e:
            return render_template('quiz_detail.html', quiz=None, error=str(e)), e.status_code or 502

    state = _load_state(quiz_id, quiz)

    if request.method == 'POST':
        action = request.form.get('action', 'answer')
        questions = quiz.get('questions') or []
        if action in ('answer', 'submit', 'toggle_answers'):
            state.capture(answers_from_form(quiz, request.form), len(questions))
        try:
            if action == 'submit':
                state.submit()
            elif action == 'reset':
                state.reset()
            elif action == 'toggle_answers':
                state.toggle_answers()
        except QuizStateError as e:
            flash(str(e), 'error')
        _save_state(quiz_id, state)
        return redirect(url_for('web.quiz_detail', quiz_id=quiz_id))

    return render_template(
        'quiz_detail.html',
        quiz=quiz,
        state=state,
        result=state.grade(quiz),
        error=None,
    )
