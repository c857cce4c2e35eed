# streamlit_app/app.py
import streamlit as st
import streamlit.components.v1 as components
import sys
import os

# Add project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from codebuddy.client.practice_client import PracticeClient
from codebuddy.models.enums import Difficulty, Subject
from streamlit_app import actions
from streamlit_app.scoreboard import Scoreboard, score_band

DARK_THEME_CSS = """
<style>
.stApp { background: linear-gradient(to bottom, #111827, #1f2937); color: #e5e7eb; }
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label { color: #e5e7eb; }
</style>
"""

# --- Page Config ---
st.set_page_config(layout="wide", page_title="CodeBuddy")

@st.cache_resource
def get_client() -> PracticeClient:
    """Creates a cached client for the proxy API."""
    return PracticeClient()

client = get_client()

# --- Session State ---
for key, default in {
    "challenge": None,
    "code": "",
    "css_code": "",
    "evaluation": None,
    "loading": None,
    "dark_mode": False,
}.items():
    st.session_state.setdefault(key, default)
if "scoreboard" not in st.session_state:
    st.session_state.scoreboard = Scoreboard()

# --- Sidebar ---
st.sidebar.title("CodeBuddy")
st.sidebar.toggle("Dark mode", key="dark_mode")
if st.session_state.dark_mode:
    st.markdown(DARK_THEME_CSS, unsafe_allow_html=True)

scoreboard = st.session_state.scoreboard
points_col, completed_col = st.sidebar.columns(2)
points_col.metric("Points", scoreboard.points)
completed_col.metric("Completed", scoreboard.completed)

st.sidebar.selectbox(
    "Subject",
    options=[s.value for s in Subject],
    format_func=str.upper,
    key="subject",
)
st.sidebar.selectbox(
    "Difficulty",
    options=[d.value for d in Difficulty],
    format_func=str.capitalize,
    key="difficulty",
)
st.sidebar.button(
    "Generating..." if st.session_state.loading == actions.GENERATING else "Start Learning",
    on_click=actions.queue,
    args=(st.session_state, actions.GENERATING),
    disabled=bool(st.session_state.loading),
    type="primary",
)

# Runs on the rerun after the click, once the disabled button is on screen
if st.session_state.loading == actions.GENERATING:
    with st.spinner("Generating a challenge..."):
        actions.run_generation(client, st.session_state)
    st.rerun()

# --- Main Content ---
challenge = st.session_state.challenge
if challenge is None:
    st.title("Choose a subject and start learning")
    st.info("Pick a subject and difficulty in the sidebar, then press **Start Learning**.")
    st.stop()

st.title(challenge.title)
st.caption(f"{challenge.subject.value.upper()} · {challenge.difficulty.value.capitalize()}")
st.markdown(challenge.description)

with st.expander("Tips"):
    st.markdown(
        "- Read the requirements carefully\n"
        "- Test your solution as you go\n"
        "- Don't hesitate to use the **Evaluate** button to check your progress"
    )

editor_col, preview_col = st.columns(2)

with editor_col:
    st.subheader("HTML Template" if challenge.subject == Subject.CSS else "Your Code")
    st.text_area("Code", key="code", height=320, label_visibility="collapsed")
    if challenge.subject == Subject.CSS:
        st.subheader("CSS")
        st.text_area("CSS", key="css_code", height=240, label_visibility="collapsed")
    st.button(
        "Evaluating..." if st.session_state.loading == actions.EVALUATING else "Evaluate",
        on_click=actions.queue,
        args=(st.session_state, actions.EVALUATING),
        disabled=bool(st.session_state.loading),
    )
    if st.session_state.loading == actions.EVALUATING:
        with st.spinner("Evaluating your code..."):
            actions.run_evaluation(client, st.session_state)
        st.rerun()

with preview_col:
    if challenge.subject in (Subject.HTML, Subject.CSS):
        st.subheader("Live Preview")
        components.html(
            f"<style>{st.session_state.css_code}</style>{st.session_state.code}",
            height=400,
            scrolling=True,
        )

# --- Evaluation Results ---
evaluation = st.session_state.evaluation
if evaluation is not None:
    st.subheader("Evaluation Results")
    band = score_band(evaluation.score)
    message = f"**{evaluation.score:g}/100**\n\n{evaluation.feedback}"
    if band == "good":
        st.success(message)
    elif band == "fair":
        st.warning(message)
    else:
        st.error(message)

    if evaluation.suggestions:
        st.markdown("**Suggestions for improvement**")
        st.markdown("\n".join(f"- {suggestion}" for suggestion in evaluation.suggestions))

    if evaluation.solution:
        st.subheader("Correct Solution")
        st.code(evaluation.solution)
