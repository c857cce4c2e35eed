# codebuddy/services/proxy_service.py
from codebuddy.services import llm_client
from codebuddy.services.prompt_library import (
    GENERATE_TASK_PROMPT,
    EVALUATE_CODE_PROMPT,
    build_evaluation_inputs,
)
from codebuddy.utils.config import settings
from codebuddy.utils.logger import logger


async def generate_task_content(subject: str, difficulty: str) -> str:
    """Asks the model for a challenge formatted as JSON and returns its text unparsed."""
    logger.info(f"Generating {difficulty} challenge for subject '{subject}'")
    return await llm_client.complete(
        GENERATE_TASK_PROMPT,
        {"subject": subject, "difficulty": difficulty},
    )


async def evaluate_code_content(task: dict, code: str, css_code: str | None = None) -> str:
    """Asks the model to score a submission; the JSON it returns is not checked here."""
    logger.info(f"Evaluating submission for task '{task.get('title')}' ({len(code)} chars of code)")
    inputs = build_evaluation_inputs(
        task,
        code,
        css_code,
        include_solution=settings.request_worked_solution,
    )
    return await llm_client.complete(EVALUATE_CODE_PROMPT, inputs)
