# Session-state transitions behind the Start Learning and Evaluate buttons
# streamlit_app/actions.py
from typing import MutableMapping

from codebuddy.client.practice_client import PracticeClient
from codebuddy.models.enums import Subject

GENERATING = "generate"
EVALUATING = "evaluate"

def queue(state: MutableMapping, action: str) -> None:
    """Button callback: mark a request as in flight so the next rerun shows it and disables the buttons."""
    if not state.get("loading"):
        state["loading"] = action

def run_generation(client: PracticeClient, state: MutableMapping) -> None:
    try:
        challenge = client.request_challenge(state["subject"], state["difficulty"])
        state["challenge"] = challenge
        state["code"] = challenge.starter_code
        state["css_code"] = ""
        state["evaluation"] = None
    finally:
        state["loading"] = None

def run_evaluation(client: PracticeClient, state: MutableMapping) -> None:
    try:
        challenge = state.get("challenge")
        if challenge is None:
            return
        css_code = state.get("css_code") if challenge.subject == Subject.CSS else None
        evaluation = client.request_evaluation(challenge, state.get("code", ""), css_code)
        state["evaluation"] = evaluation
        state["scoreboard"].record(challenge, evaluation)
    finally:
        state["loading"] = None
