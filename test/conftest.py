"""
Pytest configuration and fixtures for testing.
Every test gets a fresh app backed by an in-memory SQLite database.
"""
import os

import httpx
import pytest

from quizbox import create_app
from quizbox.client import QuizApiClient


@pytest.fixture
def app():
    """Create application for testing."""
    # Set test environment variables BEFORE creating app
    os.environ['FLASK_ENV'] = 'testing'
    os.environ['SECRET_KEY'] = 'sfndsfojoriwew09rjfjndsknfkj'
    os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
    os.environ['API_PREFIX'] = '/api'
    os.environ['API_BASE_URL'] = ''
    os.environ['SESSION_COOKIE_SECURE'] = 'false'

    app = create_app()
    app.config['TESTING'] = True
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def api_client(app):
    """QuizApiClient wired to the test app through the WSGI transport."""
    with QuizApiClient("http://testserver", transport=httpx.WSGITransport(app=app)) as api:
        yield api


@pytest.fixture
def quiz_payload():
    """A four question quiz covering every question type."""
    return {
        'title': 'European Capitals',
        'description': 'Warm-up round',
        'questions': [
            {'type': 'BOOLEAN', 'questionText': 'Paris is the capital of France.', 'correctAnswer': True},
            {'type': 'INPUT', 'questionText': 'Capital of Italy?', 'correctText': 'Rome'},
            {
                'type': 'CHECKBOX',
                'questionText': 'Which of these are capitals?',
                'options': [
                    {'text': 'Oslo', 'isCorrect': True},
                    {'text': 'Lyon', 'isCorrect': False},
                    {'text': 'Lisbon', 'isCorrect': True},
                ],
            },
            {'type': 'BOOLEAN', 'questionText': 'Berlin is in Austria.', 'correctAnswer': False},
        ],
    }


@pytest.fixture
def created_quiz(client, quiz_payload):
    """The sample quiz stored through the API; returns its JSON summary."""
    response = client.post('/api/quizzes', json=quiz_payload)
    assert response.status_code == 201
    return response.get_json()
