# codebuddy/models/enums.py
from enum import Enum

class Subject(str, Enum):
    """Subjects a practice challenge can be generated for."""
    HTML = "html"
    CSS = "css"
    FLASK = "flask"
    SQLITE = "sqlite"

class Difficulty(str, Enum):
    """Difficulty levels offered for every subject."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
