"""
REST routes for quiz management.

- POST   /quizzes        create a quiz with its questions and options
- GET    /quizzes        list quizzes with question counts
- GET    /quizzes/<id>   full quiz, correct answers included
- PATCH  /quizzes/<id>   accepted, not implemented
- DELETE /quizzes/<id>   delete a quiz and everything under it
"""
from flask import jsonify, request, current_app
from quizbox.api import api_bp
from quizbox.quiz import service
from quizbox.quiz.errors import QuizNotFoundError, QuizValidationError


@api_bp.route('/quizzes', methods=['POST'])
def create_quiz():
    """Create a new quiz. See service.create_quiz for the request body."""
    data = request.get_json(silent=True)

    try:
        quiz = service.create_quiz(data)
        return jsonify(quiz.to_summary()), 201

    except QuizValidationError as e:
        current_app.logger.warning(f"Quiz rejected: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception(f"Error creating quiz: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 500


@api_bp.route('/quizzes', methods=['GET'])
def list_quizzes():
    try:
        return jsonify(service.list_quizzes()), 200
    except Exception as e:
        current_app.logger.exception(f"Error listing quizzes: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 500


@api_bp.route('/quizzes/<int:quiz_id>', methods=['GET'])
def get_quiz(quiz_id):
    """
    Get quiz details including all questions.
    CHECKBOX questions carry their options with the isCorrect flag.
    """
    try:
        quiz = service.get_quiz(quiz_id)
        return jsonify(quiz.to_dict()), 200

    except QuizNotFoundError as e:
        current_app.logger.warning(f"Quiz not found: quiz_id={quiz_id}")
        return jsonify({'success': False, 'error': str(e)}), 404
    except Exception as e:
        current_app.logger.exception(f"Error loading quiz {quiz_id}: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 500


@api_bp.route('/quizzes/<int:quiz_id>', methods=['PATCH'])
def update_quiz(quiz_id):
    return service.update_quiz(quiz_id, request.get_json(silent=True)), 200


@api_bp.route('/quizzes/<int:quiz_id>', methods=['DELETE'])
def delete_quiz(quiz_id):
    """
    Delete a quiz.
    """
    try:
        service.delete_quiz(quiz_id)
        return jsonify({
            'success': True,
            'message': 'Quiz deleted successfully'
        }), 200

    except QuizNotFoundError as e:
        current_app.logger.warning(f"Quiz not found: quiz_id={quiz_id}")
        return jsonify({'success': False, 'error': str(e)}), 404
    except Exception as e:
        current_app.logger.exception(f"Error deleting quiz {quiz_id}: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 500
