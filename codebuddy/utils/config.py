# codebuddy/utils/config.py
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file before defining settings
load_dotenv()

class Settings(BaseSettings):
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format: str = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    # --- Proxy Server ---
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = 3000

    # --- LLM Provider Configuration ---
    llm_provider: str = os.getenv("LLM_PROVIDER", "together").lower()

    # Together AI specific (the old front-end build exposed the key as VITE_TOGETHER_API_KEY)
    together_api_key: str | None = os.getenv("TOGETHER_API_KEY") or os.getenv("VITE_TOGETHER_API_KEY")
    together_base_url: str = os.getenv("TOGETHER_BASE_URL", "https://api.together.xyz/v1")
    together_model_name: str = os.getenv("TOGETHER_MODEL_NAME", "meta-llama/Llama-3.3-70B-Instruct-Turbo-Free")

    # OpenAI specific
    openai_api_key: str | None = os.getenv("OPENAI_API_KEY")
    openai_model_name: str = os.getenv("OPENAI_MODEL_NAME", "gpt-4o-mini")

    # Google Gemini specific
    google_api_key: str | None = os.getenv("GOOGLE_API_KEY")
    google_model_name: str = os.getenv("GOOGLE_MODEL_NAME", "gemini-1.5-flash-latest")

    # Sampling parameters, identical for challenge generation and evaluation
    max_tokens: int = 1000
    temperature: float = 0.7
    top_p: float = 0.7
    top_k: int = 50
    repetition_penalty: float = 1.0
    stop_sequences: list[str] = ["<|eot_id|>", "<|eom_id|>"]

    # Ask the model for a worked "solution" field when evaluating code
    request_worked_solution: bool = False

    # --- Client Adapter / Practice UI ---
    api_base_url: str = os.getenv("CODEBUDDY_API_BASE_URL", "http://localhost:3000/api")
    client_timeout_seconds: float | None = None # None keeps the transport default
    passing_score: int = 70

settings = Settings()
