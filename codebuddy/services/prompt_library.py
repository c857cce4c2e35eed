# codebuddy/services/prompt_library.py
from langchain_core.prompts import PromptTemplate

GENERATE_TASK_PROMPT = PromptTemplate.from_template(
    """Generate a coding challenge for {subject} at {difficulty} level. Include:
    - Title
    - Description
    - Starter code
    - Example solution
    Format as JSON with the following structure:
    {{
      "title": "Challenge title",
      "description": "Detailed description",
      "difficulty": "{difficulty}",
      "subject": "{subject}",
      "starterCode": "Initial code template"
    }}"""
)

EVALUATE_CODE_PROMPT = PromptTemplate.from_template(
    """Evaluate this {subject} code for the following task:

Task: {title}
Description: {description}

Student's Code:
{code}
{css_section}

Provide feedback in JSON format with exactly this structure:
{{
  "score": <number between 0 and 100>,
  "feedback": "detailed explanation of the evaluation",
  "suggestions": ["improvement point 1", "improvement point 2", ...]{solution_field}
}}"""
)

SOLUTION_FIELD = ',\n  "solution": "a complete worked solution to the task"'


def _field_text(value) -> str:
    return "" if value is None else str(value)


def build_evaluation_inputs(task: dict, code: str, css_code: str | None = None, include_solution: bool = False) -> dict:
    """Maps a task record and a submission onto the EVALUATE_CODE_PROMPT variables."""
    return {
        "subject": _field_text(task.get("subject")),
        "title": _field_text(task.get("title")),
        "description": _field_text(task.get("description")),
        "code": code,
        "css_section": f"CSS Code:\n{css_code}" if css_code else "",
        "solution_field": SOLUTION_FIELD if include_solution else "",
    }
