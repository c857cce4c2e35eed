# Static challenges and the canned evaluation used whenever the LLM path fails
# codebuddy/client/fallbacks.py
from typing import Dict, Tuple

from codebuddy.models.challenge import Challenge, Evaluation
from codebuddy.models.enums import Difficulty, Subject
from codebuddy.utils.logger import logger

def _challenge(subject: Subject, difficulty: Difficulty, title: str, description: str, starter_code: str) -> Challenge:
    return Challenge(
        title=title,
        description=description,
        difficulty=difficulty,
        subject=subject,
        starter_code=starter_code,
    )

FALLBACK_CHALLENGES: Dict[Tuple[Subject, Difficulty], Challenge] = {
    (Subject.HTML, Difficulty.EASY): _challenge(
        Subject.HTML, Difficulty.EASY,
        "Create a Navigation Menu",
        "Create a responsive navigation menu with 4 links that stack vertically on mobile devices.",
        "<nav>\n  <!-- Your code here -->\n</nav>",
    ),
    (Subject.HTML, Difficulty.MEDIUM): _challenge(
        Subject.HTML, Difficulty.MEDIUM,
        "Build a Contact Form",
        "Create a contact form with name, email, and message fields.",
        "<form>\n  <!-- Your code here -->\n</form>",
    ),
    (Subject.HTML, Difficulty.HARD): _challenge(
        Subject.HTML, Difficulty.HARD,
        "Create a Complex Layout",
        "Build a responsive grid layout with header, sidebar, main content, and footer.",
        '<div class="layout">\n  <!-- Your code here -->\n</div>',
    ),
    (Subject.CSS, Difficulty.EASY): _challenge(
        Subject.CSS, Difficulty.EASY,
        "Style a Button",
        "Create a stylish button with hover effects.",
        ".button {\n  /* Your styles here */\n}",
    ),
    (Subject.CSS, Difficulty.MEDIUM): _challenge(
        Subject.CSS, Difficulty.MEDIUM,
        "Create a Card Component",
        "Style a card component with image, title, and description.",
        ".card {\n  /* Your styles here */\n}",
    ),
    (Subject.CSS, Difficulty.HARD): _challenge(
        Subject.CSS, Difficulty.HARD,
        "Implement Dark Mode",
        "Create a dark mode theme with smooth transitions.",
        ":root {\n  /* Your variables here */\n}",
    ),
    (Subject.FLASK, Difficulty.EASY): _challenge(
        Subject.FLASK, Difficulty.EASY,
        "Hello World Route",
        'Create a simple Flask route that returns "Hello, World!"',
        "from flask import Flask\n\napp = Flask(__name__)\n\n# Your code here",
    ),
    (Subject.FLASK, Difficulty.MEDIUM): _challenge(
        Subject.FLASK, Difficulty.MEDIUM,
        "REST API Endpoint",
        "Create a REST API endpoint that handles GET and POST requests.",
        "from flask import Flask, request\n\napp = Flask(__name__)\n\n# Your code here",
    ),
    (Subject.FLASK, Difficulty.HARD): _challenge(
        Subject.FLASK, Difficulty.HARD,
        "Database Integration",
        "Create a Flask route that interacts with a database.",
        "from flask import Flask\nfrom flask_sqlalchemy import SQLAlchemy\n\n# Your code here",
    ),
    (Subject.SQLITE, Difficulty.EASY): _challenge(
        Subject.SQLITE, Difficulty.EASY,
        "Create Table",
        "Create a table for storing user information.",
        "CREATE TABLE users (\n  -- Your schema here\n);",
    ),
    (Subject.SQLITE, Difficulty.MEDIUM): _challenge(
        Subject.SQLITE, Difficulty.MEDIUM,
        "Complex Queries",
        "Write a query to join multiple tables and filter results.",
        "SELECT *\nFROM table1\n-- Your join conditions here",
    ),
    (Subject.SQLITE, Difficulty.HARD): _challenge(
        Subject.SQLITE, Difficulty.HARD,
        "Optimize Performance",
        "Optimize a slow query using indexes and proper join strategies.",
        "-- Create indexes and write your optimized query here",
    ),
}

FALLBACK_FEEDBACK = "Unable to evaluate code at this time. Please try again later."
FALLBACK_SUGGESTIONS = [
    "Check your code syntax",
    "Ensure your solution matches the requirements",
    "Try again in a few moments",
]

def get_fallback_challenge(subject: Subject | str, difficulty: Difficulty | str) -> Challenge:
    """Looks up the static challenge for (subject, difficulty); unknown values resolve to html/easy."""
    try:
        key = (Subject(str(getattr(subject, "value", subject)).strip().lower()),
               Difficulty(str(getattr(difficulty, "value", difficulty)).strip().lower()))
    except ValueError:
        logger.warning(f"No fallback challenge for '{subject}'/'{difficulty}', defaulting to html/easy.")
        key = (Subject.HTML, Difficulty.EASY)
    return FALLBACK_CHALLENGES[key]

def get_fallback_evaluation() -> Evaluation:
    return Evaluation(score=0, feedback=FALLBACK_FEEDBACK, suggestions=list(FALLBACK_SUGGESTIONS))
