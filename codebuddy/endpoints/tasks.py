# Endpoints that forward challenge generation and code evaluation to the LLM
# codebuddy/endpoints/tasks.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from codebuddy.services import proxy_service
from codebuddy.utils.logger import logger

router = APIRouter()

class GenerateTaskRequest(BaseModel):
    subject: str
    difficulty: str

class EvaluateCodeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Challenge-shaped record, forwarded into the prompt without checks
    task: dict
    code: str
    css_code: str | None = Field(default=None, alias="cssCode")

class ContentResponse(BaseModel):
    content: str

def _error_response(e: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(e) or "Invalid API response"})

@router.post("/generate-task", response_model=ContentResponse)
async def generate_task(request: GenerateTaskRequest):
    logger.info(f"Challenge requested: subject='{request.subject}', difficulty='{request.difficulty}'")
    try:
        content = await proxy_service.generate_task_content(request.subject, request.difficulty)
    except Exception as e:
        logger.exception(f"Error generating task: {e}")
        return _error_response(e)
    return ContentResponse(content=content)

@router.post("/evaluate-code", response_model=ContentResponse)
async def evaluate_code(request: EvaluateCodeRequest):
    logger.info(f"Evaluation requested for task '{request.task.get('title')}'")
    try:
        content = await proxy_service.evaluate_code_content(
            request.task,
            request.code,
            request.css_code,
        )
    except Exception as e:
        logger.exception(f"Error evaluating code: {e}")
        return _error_response(e)
    return ContentResponse(content=content)
