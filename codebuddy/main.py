# FastAPI entry point for the CodeBuddy proxy; run with `python -m codebuddy.main`
# codebuddy/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import sys
import uvicorn

from codebuddy.endpoints import tasks as tasks_router
from codebuddy.services.llm_client import ensure_llm_client_initialized
from codebuddy.utils.config import settings
from codebuddy.utils.logger import logger

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("CodeBuddy API starting up...")

    logger.info("Initializing LLM client...")
    try:
        ensure_llm_client_initialized()
    except Exception as e:
        logger.critical(f"Fatal error during LLM client initialization: {e}")
        sys.exit(1) # Exit if the client fails, as the app is not functional

    logger.info("Startup complete.")
    yield
    logger.info("CodeBuddy API shutting down...")

# --- FastAPI App Initialization ---
app = FastAPI(
    title="CodeBuddy API",
    description="Generates coding challenges and evaluates submissions with an LLM.",
    version="1.0.0",
    lifespan=lifespan
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this to your frontend's domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Routers ---
app.include_router(tasks_router.router, prefix="/api", tags=["Tasks"])

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {"message": "Welcome to the CodeBuddy API"}

if __name__ == "__main__":
    uvicorn.run("codebuddy.main:app", host=settings.host, port=settings.port)
