"""
Database models for quiz functionality.

Supports three question types:
- BOOLEAN: True/False questions, correct_answer holds the expected boolean
- INPUT: Free text questions, correct_text holds the expected answer
- CHECKBOX: Questions with options, any number of which may be correct
"""
from datetime import datetime
from quizbox import db
from quizbox.quiz import QuestionType


class Quiz(db.Model):
    """
    Model for quizzes.

    A quiz owns its questions; deleting a quiz removes its questions
    and their options.
    """
    __tablename__ = "quizzes"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    questions = db.relationship(
        "Question",
        backref="quiz",
        cascade="all, delete-orphan",
        order_by="Question.order_index",
    )

    def __repr__(self) -> str:
        return f"<Quiz {self.id}: {self.title}>"

    def get_question_count(self) -> int:
        """Get total number of questions."""
        return len(self.questions)

    def to_summary(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
        }

    def to_dict(self) -> dict:
        """Full quiz with nested questions and options, correct answers included."""
        data = self.to_summary()
        data['createdAt'] = self.created_at.isoformat() if self.created_at else None
        data['questions'] = [question.to_dict() for question in self.questions]
        return data


class Question(db.Model):
    """
    Model for quiz questions.

    Only the correctness column that matches question_type is populated:
    correct_answer for BOOLEAN, correct_text for INPUT, neither for CHECKBOX
    (which uses Option.is_correct instead).
    """
    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id", ondelete='CASCADE'), nullable=False, index=True)
    question_type = db.Column(db.Enum(QuestionType, name="question_type"), nullable=False)
    question_text = db.Column(db.Text, nullable=False)
    correct_answer = db.Column(db.Boolean, nullable=True)  # BOOLEAN only
    correct_text = db.Column(db.Text, nullable=True)  # INPUT only
    order_index = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    options = db.relationship(
        "Option",
        backref="question",
        cascade="all, delete-orphan",
        order_by="Option.order_index",
    )

    __table_args__ = (
        db.Index('ix_questions_quiz_order', 'quiz_id', 'order_index'),
    )

    def __repr__(self) -> str:
        return f"<Question {self.id}: {self.question_type.value}>"

    def to_dict(self) -> dict:
        data = {
            'id': self.id,
            'type': self.question_type.value,
            'questionText': self.question_text,
            'correctAnswer': self.correct_answer,
            'correctText': self.correct_text,
        }
        if self.question_type is QuestionType.CHECKBOX:
            data['options'] = [option.to_dict() for option in self.options]
        return data


class Option(db.Model):
    """
    Model for checkbox question options.
    Only used for CHECKBOX questions.
    """
    __tablename__ = "options"

    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey("questions.id", ondelete='CASCADE'), nullable=False, index=True)
    text = db.Column(db.Text, nullable=False)
    is_correct = db.Column(db.Boolean, default=False, nullable=False)
    order_index = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.Index('ix_options_question_order', 'question_id', 'order_index'),
    )

    def __repr__(self) -> str:
        return f"<Option {self.id}: {self.text[:50]}>"

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'text': self.text,
            'isCorrect': self.is_correct,
        }
