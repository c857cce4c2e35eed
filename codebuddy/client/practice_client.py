# HTTP client for the proxy API; always resolves to a usable Challenge or Evaluation
# codebuddy/client/practice_client.py
from enum import Enum

import requests
from pydantic import ValidationError

from codebuddy.client.fallbacks import get_fallback_challenge, get_fallback_evaluation
from codebuddy.client.json_extraction import extract_json_object
from codebuddy.models.challenge import Challenge, Evaluation
from codebuddy.models.enums import Difficulty, Subject
from codebuddy.utils.config import settings
from codebuddy.utils.logger import logger

# Failures that trigger the static fallback instead of reaching the caller
FALLBACK_ERRORS = (requests.RequestException, ValidationError, ValueError, TypeError)

def _as_text(value) -> str:
    return value.value if isinstance(value, Enum) else value

def _known_choice(value, choices, requested):
    """The model's echo of subject/difficulty if it names a member, otherwise what was requested."""
    if isinstance(value, str):
        try:
            return choices(value.strip().lower())
        except ValueError:
            pass
    return requested

class PracticeClient:
    def __init__(self, base_url: str | None = None, session: requests.Session | None = None,
                 timeout: float | None = None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.client_timeout_seconds

    def _post_for_content(self, path: str, payload: dict) -> str:
        """POSTs to the proxy and returns the raw completion text, raising on any error signal."""
        response = self.session.post(f"{self.base_url}/{path}", json=payload, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError("Unexpected response body from proxy")
        if data.get("error"):
            raise ValueError(f"Proxy reported an error: {data['error']}")
        content = data.get("content")
        if not isinstance(content, str):
            raise ValueError("Proxy response has no text content")
        return content

    def request_challenge(self, subject, difficulty) -> Challenge:
        """
        Generates a challenge through the proxy. Any transport, parse or
        validation failure is logged and answered with the static challenge
        for the same (subject, difficulty). Nothing is retried.
        """
        subject, difficulty = _as_text(subject), _as_text(difficulty)
        try:
            content = self._post_for_content("generate-task", {"subject": subject, "difficulty": difficulty})
            payload = extract_json_object(content)
            if payload is None:
                raise ValueError("No JSON object found in generated challenge")
            payload["subject"] = _known_choice(payload.get("subject"), Subject, subject)
            payload["difficulty"] = _known_choice(payload.get("difficulty"), Difficulty, difficulty)
            return Challenge.model_validate(payload)
        except FALLBACK_ERRORS as e:
            logger.warning(f"AI generation failed for {subject}/{difficulty}, using fallback challenge: {e}")
            return get_fallback_challenge(subject, difficulty)

    def request_evaluation(self, task, code: str, css_code: str | None = None) -> Evaluation:
        """Scores a submission through the proxy, falling back to a fixed zero-score Evaluation."""
        if isinstance(task, Challenge):
            task = task.model_dump(mode="json", by_alias=True)
        payload = {"task": task, "code": code}
        if css_code is not None:
            payload["cssCode"] = css_code

        try:
            content = self._post_for_content("evaluate-code", payload)
            result = extract_json_object(content)
            if result is None:
                raise ValueError("No JSON object found in evaluation")
            return Evaluation.model_validate(result)
        except FALLBACK_ERRORS as e:
            logger.warning(f"Evaluation failed, using fallback evaluation: {e}")
            return get_fallback_evaluation()
