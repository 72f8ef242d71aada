class QuizError(Exception):
    pass


class QuizNotFoundError(QuizError):
    def __init__(self, quiz_id):
        super().__init__("Quiz not found")
        self.quiz_id = quiz_id


class QuizValidationError(QuizError):
    pass


class QuizStateError(QuizError):
    pass
