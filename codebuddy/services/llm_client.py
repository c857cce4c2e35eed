# Chat-completion client shared by both proxy endpoints; one lazily built model per process
# codebuddy/services/llm_client.py
from langchain_together import ChatTogether
from langchain_openai import ChatOpenAI
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.prompts import PromptTemplate
from langchain_core.output_parsers import StrOutputParser

from codebuddy.utils.config import settings
from codebuddy.utils.logger import logger
import threading

# --- Global LLM client (initialized lazily) ---
_llm_client = None
_init_lock = threading.Lock()


class CompletionError(RuntimeError):
    """The LLM capability could not produce a usable completion."""


class EmptyCompletionError(CompletionError):
    pass


def _build_llm_client(provider: str):
    """Creates the chat model for the configured provider with the fixed sampling parameters."""
    if provider == "together":
        if not settings.together_api_key:
            raise ValueError("LLM_PROVIDER is 'together' but TOGETHER_API_KEY is not set in .env")
        return ChatTogether(
            api_key=settings.together_api_key,
            base_url=settings.together_base_url,
            model=settings.together_model_name,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            top_p=settings.top_p,
            # Not part of the OpenAI schema, Together reads them from the request body
            extra_body={"top_k": settings.top_k, "repetition_penalty": settings.repetition_penalty},
        )
    elif provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("LLM_PROVIDER is 'openai' but OPENAI_API_KEY is not set in .env")
        return ChatOpenAI(
            api_key=settings.openai_api_key,
            model=settings.openai_model_name,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            top_p=settings.top_p,
        )
    elif provider == "google":
        if not settings.google_api_key:
            raise ValueError("LLM_PROVIDER is 'google' but GOOGLE_API_KEY is not set in .env")
        return ChatGoogleGenerativeAI(
            google_api_key=settings.google_api_key,
            model=settings.google_model_name,
            max_output_tokens=settings.max_tokens,
            temperature=settings.temperature,
            top_p=settings.top_p,
            top_k=settings.top_k,
        )
    raise ValueError(f"Unsupported LLM_PROVIDER: {provider}")


def _initialize_llm_client():
    """Initializes the LLM client if not already done. Returns True on success, False on failure."""
    global _llm_client

    with _init_lock:
        if _llm_client:
            return True

        logger.info(f"Initializing LLM client for provider: {settings.llm_provider}")
        try:
            _llm_client = _build_llm_client(settings.llm_provider)
        except Exception as e:
            logger.exception(f"CRITICAL: Failed to initialize LLM client: {e}")
            _llm_client = None
            return False

        logger.info(f"Initialized LLM with provider {settings.llm_provider}")
        return True


async def complete(prompt: PromptTemplate, inputs: dict) -> str:
    """
    Renders the prompt as a single user message, calls the model once and
    returns the raw completion text. No retries.
    """
    if not _llm_client:
        if not _initialize_llm_client():
            raise CompletionError("LLM client is not available.")

    logger.debug(f"--- FINAL PROMPT FOR LLM ---\n{prompt.format(**inputs)}\n---------------------------")

    chain = prompt | _llm_client.bind(stop=list(settings.stop_sequences)) | StrOutputParser()
    content = await chain.ainvoke(inputs)

    if not content or not content.strip():
        raise EmptyCompletionError("Invalid API response")
    return content


def ensure_llm_client_initialized():
    """Public function to trigger initialization, e.g., during app startup."""
    if not _llm_client:
        if not _initialize_llm_client():
            raise RuntimeError("Failed to initialize the LLM client during startup check.")
        logger.info("LLM client initialized successfully during startup check.")
    else:
        logger.info("LLM client already initialized.")
