"""
Quiz module for authoring, storing and grading quizzes.

Quizzes are stored by the service layer and graded entirely on the
client side from the answers held in the browser session.
"""
import enum


class QuestionType(str, enum.Enum):
    BOOLEAN = "BOOLEAN"
    INPUT = "INPUT"
    CHECKBOX = "CHECKBOX"

    @classmethod
    def parse(cls, value):
        """Return the matching type, or None for an unknown tag."""
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None
