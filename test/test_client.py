"""
Test cases for the REST client used by the browser pages.
"""
import httpx
import pytest

from quizbox.client import IN_PROCESS_BASE_URL, QuizApiClient, QuizApiError


class TestClientAgainstApp:
    """Client talking to the real app through the WSGI transport."""

    def test_create_list_get_delete(self, api_client, quiz_payload):
        created = api_client.create_quiz(quiz_payload['title'], quiz_payload['description'], quiz_payload['questions'])
        assert created['title'] == 'European Capitals'

        assert [q['numberOfQuestions'] for q in api_client.list_quizzes()] == [4]
        assert len(api_client.get_quiz(created['id'])['questions']) == 4

        api_client.delete_quiz(created['id'])
        assert api_client.list_quizzes() == []

    def test_server_error_message_is_surfaced(self, api_client):
        with pytest.raises(QuizApiError) as excinfo:
            api_client.get_quiz(12345)
        assert str(excinfo.value) == 'Quiz not found'
        assert excinfo.value.status_code == 404
        assert excinfo.value.not_found

    def test_validation_error_is_surfaced(self, api_client):
        with pytest.raises(QuizApiError, match='Checkbox question must have options') as excinfo:
            api_client.create_quiz('T', '', [{'type': 'CHECKBOX', 'questionText': 'Pick', 'options': []}])
        assert excinfo.value.status_code == 400


class TestClientFailures:
    """Responses without an error message, and transport failures."""

    def test_fallback_message_for_non_json_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text='<html>oops</html>'))
        with QuizApiClient('http://backend', transport=transport) as api:
            with pytest.raises(QuizApiError) as excinfo:
                api.list_quizzes()
        assert str(excinfo.value) == 'Failed to fetch quizzes'
        assert excinfo.value.status_code == 500

    def test_connection_failure(self):
        def refuse(request):
            raise httpx.ConnectError('connection refused', request=request)

        with QuizApiClient('http://backend', transport=httpx.MockTransport(refuse)) as api:
            with pytest.raises(QuizApiError, match='Failed to delete quiz') as excinfo:
                api.delete_quiz(1)
        assert excinfo.value.status_code is None

    def test_urls(self):
        seen = []

        def record(request):
            seen.append((request.method, str(request.url)))
            return httpx.Response(200, json={'id': 3, 'questions': []})

        with QuizApiClient('http://backend/', api_prefix='/v1', transport=httpx.MockTransport(record)) as api:
            api.get_quiz(3)
        assert seen == [('GET', 'http://backend/v1/quizzes/3')]


class TestFromApp:
    """Building the client from app config."""

    def test_in_process_when_no_base_url(self, app):
        with QuizApiClient.from_app(app) as api:
            assert api.api_url == f'{IN_PROCESS_BASE_URL}/api/quizzes'
            assert api.list_quizzes() == []

    def test_remote_base_url(self, app):
        app.config['API_BASE_URL'] = 'https://quiz.example.com'
        with QuizApiClient.from_app(app) as api:
            assert api.api_url == 'https://quiz.example.com/api/quizzes'
