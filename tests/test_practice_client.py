# tests/test_practice_client.py
import pytest
import requests
from fastapi.testclient import TestClient

from codebuddy.client.practice_client import PracticeClient
from codebuddy.client.fallbacks import FALLBACK_FEEDBACK, get_fallback_challenge
from codebuddy.models.challenge import Challenge
from codebuddy.models.enums import Difficulty, Subject

GOOD_CHALLENGE_TEXT = (
    'Here you go!\n{"title": "Pricing Table", "description": "Three columns.", '
    '"difficulty": "medium", "subject": "html", "starterCode": "<table></table>", '
    '"solution": "<table><tr></tr></table>"}'
)

@pytest.fixture
def practice_client(http_session):
    return PracticeClient(base_url="http://proxy.test/api/", session=http_session)


class TestRequestChallenge:
    def test_well_formed_response_is_returned(self, practice_client, http_session, http_response):
        http_session.post.return_value = http_response(body={"content": GOOD_CHALLENGE_TEXT})

        challenge = practice_client.request_challenge("html", "medium")

        assert challenge == Challenge(
            title="Pricing Table",
            description="Three columns.",
            difficulty=Difficulty.MEDIUM,
            subject=Subject.HTML,
            starter_code="<table></table>",
        )
        http_session.post.assert_called_once_with(
            "http://proxy.test/api/generate-task",
            json={"subject": "html", "difficulty": "medium"},
            timeout=None,
        )

    def test_enum_arguments_are_sent_as_strings(self, practice_client, http_session, http_response):
        http_session.post.return_value = http_response(body={"content": GOOD_CHALLENGE_TEXT})
        practice_client.request_challenge(Subject.HTML, Difficulty.MEDIUM)
        assert http_session.post.call_args.kwargs["json"] == {"subject": "html", "difficulty": "medium"}

    def test_missing_subject_and_difficulty_are_filled_in(self, practice_client, http_session, http_response):
        text = '{"title": "T", "description": "D", "starterCode": "SELECT 1;"}'
        http_session.post.return_value = http_response(body={"content": text})

        challenge = practice_client.request_challenge("sqlite", "easy")

        assert challenge.title == "T"
        assert (challenge.subject, challenge.difficulty) == (Subject.SQLITE, Difficulty.EASY)

    @pytest.mark.parametrize("echoed", [
        '"subject": null, "difficulty": null',
        '"subject": "HTML5", "difficulty": "Intermediate"',
        '"subject": 3, "difficulty": ["medium"]',
    ])
    def test_unrecognised_subject_and_difficulty_use_the_request(self, practice_client, http_session, http_response, echoed):
        text = '{"title": "Pricing Table", "description": "Three columns.", ' + echoed + ', "starterCode": "<table></table>"}'
        http_session.post.return_value = http_response(body={"content": text})

        challenge = practice_client.request_challenge("html", "medium")

        assert challenge.title == "Pricing Table"
        assert (challenge.subject, challenge.difficulty) == (Subject.HTML, Difficulty.MEDIUM)

    def test_recognised_echo_is_kept(self, practice_client, http_session, http_response):
        text = '{"title": "T", "description": "D", "subject": " CSS ", "difficulty": "Hard", "starterCode": "a {}"}'
        http_session.post.return_value = http_response(body={"content": text})

        challenge = practice_client.request_challenge("html", "easy")

        assert (challenge.subject, challenge.difficulty) == (Subject.CSS, Difficulty.HARD)

    def test_no_json_falls_back(self, practice_client, http_session, http_response):
        http_session.post.return_value = http_response(body={"content": "Sorry, I can't help with that."})
        assert practice_client.request_challenge("flask", "easy") == get_fallback_challenge("flask", "easy")

    def test_missing_starter_code_falls_back(self, practice_client, http_session, http_response):
        text = '{"title": "Partial", "description": "No starter code", "subject": "css", "difficulty": "easy"}'
        http_session.post.return_value = http_response(body={"content": text})

        challenge = practice_client.request_challenge("css", "easy")

        assert challenge.title == "Style a Button"

    def test_empty_title_falls_back(self, practice_client, http_session, http_response):
        text = '{"title": "", "description": "D", "starterCode": "x"}'
        http_session.post.return_value = http_response(body={"content": text})
        assert practice_client.request_challenge("html", "hard").title == "Create a Complex Layout"

    def test_error_body_falls_back(self, practice_client, http_session, http_response):
        http_session.post.return_value = http_response(body={"error": "Invalid API response"})
        assert practice_client.request_challenge("sqlite", "medium").title == "Complex Queries"

    def test_server_error_falls_back(self, practice_client, http_session, http_response):
        http_session.post.return_value = http_response(500, {"error": "Invalid API response"})
        assert practice_client.request_challenge("sqlite", "hard").title == "Optimize Performance"

    def test_provider_outage_returns_dark_mode_challenge(self, practice_client, http_session):
        http_session.post.side_effect = requests.ConnectionError("Connection refused")

        challenge = practice_client.request_challenge("css", "hard")

        assert challenge.title == "Implement Dark Mode"
        assert challenge.subject == Subject.CSS
        assert challenge.difficulty == Difficulty.HARD
        assert challenge.starter_code == ":root {\n  /* Your variables here */\n}"
        assert http_session.post.call_count == 1  # no retries


class TestRequestEvaluation:
    TASK = get_fallback_challenge("html", "easy")

    def test_string_score_is_coerced(self, practice_client, http_session, http_response):
        text = '{"score": "85", "feedback": "Good job", "suggestions": ["Add comments"]}'
        http_session.post.return_value = http_response(body={"content": text})

        evaluation = practice_client.request_evaluation(self.TASK, "<nav></nav>")

        assert evaluation.score == 85
        assert isinstance(evaluation.score, float)
        assert evaluation.feedback == "Good job"
        assert evaluation.suggestions == ["Add comments"]
        assert evaluation.solution is None

    def test_structured_suggestions_become_text(self, practice_client, http_session, http_response):
        text = '{"score": 88, "feedback": "Good", "suggestions": [{"point": "Add alt text"}, "Use semantic tags"]}'
        http_session.post.return_value = http_response(body={"content": text})

        evaluation = practice_client.request_evaluation(self.TASK, "<nav></nav>")

        assert evaluation.score == 88
        assert evaluation.suggestions == ["Add alt text", "Use semantic tags"]

    def test_request_body(self, practice_client, http_session, http_response):
        text = '{"score": 50, "feedback": "ok", "suggestions": []}'
        http_session.post.return_value = http_response(body={"content": text})

        practice_client.request_evaluation(self.TASK, "<nav></nav>", css_code="nav { display: flex; }")

        url = http_session.post.call_args.args[0]
        body = http_session.post.call_args.kwargs["json"]
        assert url == "http://proxy.test/api/evaluate-code"
        assert body["task"]["starterCode"] == self.TASK.starter_code
        assert body["task"]["subject"] == "html"
        assert body["code"] == "<nav></nav>"
        assert body["cssCode"] == "nav { display: flex; }"

    def test_css_code_omitted_when_not_given(self, practice_client, http_session, http_response):
        http_session.post.return_value = http_response(body={"content": "{}"})
        practice_client.request_evaluation({"title": "T"}, "code")
        assert "cssCode" not in http_session.post.call_args.kwargs["json"]

    def test_extra_fields_pass_through(self, practice_client, http_session, http_response):
        text = ('{"score": 92, "feedback": "Great", "suggestions": ["Use semantic tags"], '
                '"solution": "<nav><a href=\\"#\\">Home</a></nav>", "confidence": "high"}')
        http_session.post.return_value = http_response(body={"content": text})

        evaluation = practice_client.request_evaluation(self.TASK, "<nav></nav>")

        assert evaluation.solution == '<nav><a href="#">Home</a></nav>'
        assert evaluation.model_extra == {"confidence": "high"}

    def test_score_is_clamped(self, practice_client, http_session, http_response):
        text = '{"score": 130, "feedback": "Wow", "suggestions": []}'
        http_session.post.return_value = http_response(body={"content": text})
        assert practice_client.request_evaluation(self.TASK, "x").score == 100

    @pytest.mark.parametrize("text", [
        '{"score": 80, "feedback": "Fine", "suggestions": "Add comments"}',
        '{"score": "eighty", "feedback": "Fine", "suggestions": []}',
        '{"score": 80, "suggestions": []}',
        '{"score": 80, "feedback": "", "suggestions": []}',
        '{"score": true, "feedback": "Fine", "suggestions": []}',
        "The code looks fine to me.",
    ])
    def test_malformed_evaluation_falls_back(self, practice_client, http_session, http_response, text):
        http_session.post.return_value = http_response(body={"content": text})

        evaluation = practice_client.request_evaluation(self.TASK, "x")

        assert evaluation.score == 0
        assert evaluation.feedback == FALLBACK_FEEDBACK
        assert len(evaluation.suggestions) == 3

    def test_transport_failure_falls_back(self, practice_client, http_session):
        http_session.post.side_effect = requests.Timeout("read timed out")
        evaluation = practice_client.request_evaluation(self.TASK, "x")
        assert evaluation.score == 0
        assert http_session.post.call_count == 1


class TestAgainstProxyApp:
    """Drives the adapter through the real FastAPI app with a fake model behind it."""

    def test_generated_challenge_round_trip(self, client: TestClient, fake_llm):
        fake_llm(GOOD_CHALLENGE_TEXT)
        adapter = PracticeClient(base_url="http://testserver/api", session=client)

        challenge = adapter.request_challenge("html", "medium")

        assert challenge.title == "Pricing Table"
        assert challenge.starter_code == "<table></table>"

    def test_evaluation_round_trip(self, client: TestClient, fake_llm):
        fake_llm('Evaluation:\n{"score": 77, "feedback": "Solid", "suggestions": ["Add alt text"]}')
        adapter = PracticeClient(base_url="http://testserver/api", session=client)

        evaluation = adapter.request_evaluation(get_fallback_challenge("html", "easy"), "<nav></nav>")

        assert evaluation.score == 77
        assert evaluation.suggestions == ["Add alt text"]
