"""
Quiz store operations.

The API controllers call these; they raise QuizNotFoundError and
QuizValidationError and leave translating them to HTTP to the caller.
"""
from flask import current_app
from sqlalchemy import func

from quizbox import db
from quizbox.quiz import QuestionType
from quizbox.quiz.drafts import QuestionDraft
from quizbox.quiz.errors import QuizNotFoundError, QuizValidationError
from quizbox.quiz.models import Quiz, Question, Option


def _parse_question(data) -> QuestionDraft:
    if not isinstance(data, dict):
        raise QuizValidationError("Each question must be an object")

    question_type = QuestionType.parse(data.get('type'))
    if question_type is None:
        raise QuizValidationError(
            'Invalid question type. Must be: BOOLEAN, INPUT, or CHECKBOX'
        )

    correct_answer = data.get('correctAnswer')
    if question_type is QuestionType.BOOLEAN and correct_answer is not None and not isinstance(correct_answer, bool):
        raise QuizValidationError('correctAnswer must be a boolean')

    for key in ('questionText', 'correctText'):
        if data.get(key) is not None and not isinstance(data[key], str):
            raise QuizValidationError(f'{key} must be a string')

    options = data.get('options')
    if options is not None and (not isinstance(options, list) or not all(isinstance(o, dict) for o in options)):
        raise QuizValidationError('options must be a list of objects')

    for opt in options or []:
        if opt.get('text') is not None and not isinstance(opt['text'], str):
            raise QuizValidationError('option text must be a string')
        if opt.get('isCorrect') is not None and not isinstance(opt['isCorrect'], bool):
            raise QuizValidationError('isCorrect must be a boolean')

    return QuestionDraft.from_payload(data)


def create_quiz(data) -> Quiz:
    """
    Create a quiz with all of its questions and options.

    Request body:
    {
        "title": "Capitals",
        "description": "Optional description",
        "questions": [
            {"type": "BOOLEAN", "questionText": "Paris is in France", "correctAnswer": true},
            {"type": "INPUT", "questionText": "Capital of Italy?", "correctText": "Rome"},
            {"type": "CHECKBOX", "questionText": "Pick the capitals",
             "options": [{"text": "Oslo", "isCorrect": true}, {"text": "Lyon", "isCorrect": false}]}
        ]
    }

    Everything is written in one transaction; on any failure nothing is kept.
    """
    if not isinstance(data, dict):
        raise QuizValidationError('Request body must be a JSON object')

    title = data.get('title')
    if not isinstance(title, str):
        raise QuizValidationError('title is required')

    description = data.get('description')
    if description is not None and not isinstance(description, str):
        raise QuizValidationError('description must be a string')

    raw_questions = data.get('questions') or []
    if not isinstance(raw_questions, list):
        raise QuizValidationError('questions must be a list')
    drafts = [_parse_question(q) for q in raw_questions]

    try:
        quiz = Quiz(title=title, description=description)
        db.session.add(quiz)

        for position, draft in enumerate(drafts):
            question = Question(
                quiz=quiz,
                question_type=draft.type,
                question_text=draft.question_text,
                order_index=position,
                correct_answer=bool(draft.correct_answer) if draft.type is QuestionType.BOOLEAN else None,
                correct_text=draft.correct_text if draft.type is QuestionType.INPUT else None,
            )
            db.session.add(question)

            if draft.type is QuestionType.CHECKBOX:
                if not draft.options:
                    raise QuizValidationError('Checkbox question must have options')
                for idx, opt in enumerate(draft.options):
                    db.session.add(Option(
                        question=question,
                        text=opt.text,
                        is_correct=opt.is_correct,
                        order_index=idx,
                    ))

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info(f"Quiz created: ID={quiz.id}, Title={quiz.title}, Questions={len(drafts)}")
    return quiz


def list_quizzes() -> list:
    """Quizzes with their question counts, oldest first."""
    question_counts = (
        db.session.query(Question.quiz_id, func.count(Question.id).label('question_count'))
        .group_by(Question.quiz_id)
        .subquery()
    )
    rows = (
        db.session.query(Quiz, func.coalesce(question_counts.c.question_count, 0))
        .outerjoin(question_counts, Quiz.id == question_counts.c.quiz_id)
        .order_by(Quiz.created_at, Quiz.id)
        .all()
    )
    return [
        {
            'id': quiz.id,
            'title': quiz.title,
            'description': quiz.description,
            'numberOfQuestions': count,
            'createdAt': quiz.created_at.isoformat() if quiz.created_at else None,
        }
        for quiz, count in rows
    ]


def get_quiz(quiz_id: int) -> Quiz:
    quiz = db.session.get(Quiz, quiz_id)
    if quiz is None:
        raise QuizNotFoundError(quiz_id)
    return quiz


def update_quiz(quiz_id: int, data) -> str:
    # Editing is not supported yet; the endpoint only acknowledges the call
    return f"This action updates a #{quiz_id} quiz"


def delete_quiz(quiz_id: int) -> None:
    """Delete a quiz together with its questions and options."""
    quiz = get_quiz(quiz_id)
    try:
        db.session.delete(quiz)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info(f"Quiz deleted: ID={quiz_id}")
