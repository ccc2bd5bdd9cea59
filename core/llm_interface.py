# core/llm_interface.py
"""
Handles all direct interactions with the completion provider: the
provider contract shared by review modules, an OpenAI-compatible HTTP
implementation, and token-count helpers used for request logging.
"""

# Standard library imports
import asyncio
import functools
import json

# Type hints
from typing import Any, Protocol

import httpx
import structlog
import tiktoken
from pydantic import BaseModel

# Local imports
from config import settings
from core.errors import CompletionError
from core.usage import TokenUsage
from models import ModuleOptions

logger = structlog.get_logger(__name__)


class CompletionOptions(BaseModel):
    """Generation parameters sent along with a prompt."""

    model: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None


class CompletionProvider(Protocol):
    """Anything that turns a prompt into free text."""

    async def generate_completion(
        self, prompt: str, options: CompletionOptions
    ) -> str: ...


def completion_options_from_module_options(
    module_options: ModuleOptions | None,
    temperature: float | None = None,
) -> CompletionOptions:
    """Resolve per-invocation module options into provider parameters."""
    return CompletionOptions(
        model=(module_options.model if module_options else None)
        or settings.DEFAULT_MODEL,
        max_tokens=(module_options.max_tokens if module_options else None)
        or settings.DEFAULT_MAX_TOKENS,
        temperature=(
            temperature if temperature is not None else settings.TEMPERATURE_REVIEW
        ),
        top_p=settings.LLM_TOP_P,
        frequency_penalty=settings.FREQUENCY_PENALTY_REVIEW,
        presence_penalty=settings.PRESENCE_PENALTY_REVIEW,
    )


# Token parameter handling
def _completion_token_param(api_base: str) -> str:
    """Return the token count parameter expected by the provider."""
    if "api.openai.com" in api_base or "api.anthropic.com" in api_base:
        return "max_completion_tokens"
    return "max_tokens"


@functools.lru_cache(maxsize=settings.TOKENIZER_CACHE_SIZE)
def _get_tokenizer(model_name: str) -> tiktoken.Encoding | None:
    """
    Gets a tiktoken encoder for the given model name, with caching.
    Tries model-specific encoding, then a default, then returns None.
    """
    try:
        try:
            return tiktoken.encoding_for_model(model_name)
        except KeyError:
            logger.debug(
                f"No direct tiktoken encoding for '{model_name}'. Using default '{settings.TIKTOKEN_DEFAULT_ENCODING}'."
            )
            return tiktoken.get_encoding(settings.TIKTOKEN_DEFAULT_ENCODING)
    except Exception as e:
        logger.error(
            f"Could not load a tokenizer for '{model_name}': {e}. "
            "Token counting will fall back to a character-based heuristic."
        )
        return None


def count_tokens(text: str, model_name: str) -> int:
    """
    Counts the number of tokens in a string for a given model.
    Uses tiktoken with caching and a character-based fallback.
    """
    if not text:
        return 0

    encoder = _get_tokenizer(model_name)
    if encoder:
        return len(encoder.encode(text, allowed_special="all"))
    return int(len(text) / settings.FALLBACK_CHARS_PER_TOKEN)


class LLMService:
    """OpenAI-compatible chat completion client implementing ``CompletionProvider``."""

    def __init__(
        self,
        timeout: float = settings.HTTPX_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        api_base: str = settings.OPENAI_API_BASE,
        api_key: str = settings.OPENAI_API_KEY,
    ):
        # Use a single async client for all requests to reuse connections
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._semaphore = asyncio.Semaphore(settings.MAX_CONCURRENT_LLM_CALLS)
        self._api_base = api_base.rstrip("/")
        self._api_key = api_key
        self.request_count = 0
        self.usage = TokenUsage()
        logger.info(
            f"LLMService initialized with a concurrency limit of {settings.MAX_CONCURRENT_LLM_CALLS}."
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def _log_llm_usage(
        self, model_name: str, usage_data: dict[str, int] | None
    ) -> None:
        """Helper to log LLM token usage if available in the response."""
        if usage_data and isinstance(usage_data, dict):
            self.usage.add(usage_data)
            logger.info(
                f"LLM ('{model_name}') Usage - Prompt: {usage_data.get('prompt_tokens', 'N/A')} tk, "
                f"Comp: {usage_data.get('completion_tokens', 'N/A')} tk, Total: {usage_data.get('total_tokens', 'N/A')} tk"
            )
        else:
            logger.debug(
                f"LLM ('{model_name}') response missing 'usage' information or 'usage' was not a dictionary."
            )

    def _build_payload(self, prompt: str, options: CompletionOptions) -> dict[str, Any]:
        resolved = completion_options_from_module_options(None).model_copy(
            update=options.model_dump(exclude_none=True)
        )
        payload: dict[str, Any] = {
            "model": resolved.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": resolved.temperature,
            "top_p": resolved.top_p,
            _completion_token_param(self._api_base): resolved.max_tokens,
        }
        if resolved.frequency_penalty:
            payload["frequency_penalty"] = resolved.frequency_penalty
        if resolved.presence_penalty:
            payload["presence_penalty"] = resolved.presence_penalty
        return payload

    async def _post_non_streaming(
        self, payload: dict[str, Any], headers: dict[str, str]
    ) -> tuple[str, dict[str, int] | None]:
        """Send a regular chat completion request."""
        payload["stream"] = False
        response = await self._client.post(
            f"{self._api_base}/chat/completions",
            json=payload,
            headers=headers,
        )
        response.raise_for_status()
        data = response.json()
        raw_text = ""
        if data.get("choices") and len(data["choices"]) > 0:
            message = data["choices"][0].get("message")
            if message and message.get("content"):
                raw_text = message["content"]
        else:
            logger.error(
                f"LLM ('{payload['model']}') Invalid response structure - missing choices/content despite 200 OK: {data}"
            )
        return raw_text, data.get("usage")

    async def generate_completion(
        self, prompt: str, options: CompletionOptions
    ) -> str:
        """Request a single completion. Any failure is raised as ``CompletionError``."""
        if not prompt or not prompt.strip():
            raise CompletionError("Failed to generate completion: empty prompt")

        payload = self._build_payload(prompt, options)
        model_name = payload["model"]
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        async with self._semaphore:
            # tiktoken may fetch its encoding file on first use
            prompt_tokens_est = await asyncio.get_running_loop().run_in_executor(
                None, count_tokens, prompt, model_name
            )
            logger.info(
                f"Generating completion with model: {model_name}",
                prompt_tokens_est=prompt_tokens_est,
            )
            try:
                self.request_count += 1
                text, usage = await self._post_non_streaming(payload, headers)
            except httpx.HTTPStatusError as e_status:
                logger.error(
                    f"LLM ('{model_name}'): HTTP status {e_status.response.status_code}. Body: {e_status.response.text[:200]}",
                    exc_info=True,
                )
                raise CompletionError(
                    f"Failed to generate completion: HTTP {e_status.response.status_code}"
                ) from e_status
            except (httpx.RequestError, json.JSONDecodeError) as e_req:
                logger.error(f"LLM ('{model_name}'): {e_req}", exc_info=True)
                raise CompletionError(
                    f"Failed to generate completion: {e_req}"
                ) from e_req

        self._log_llm_usage(model_name, usage)
        logger.info("Completion generated successfully", model=model_name)
        return text
