import logging

from openai import AsyncOpenAI

from textsql.config import settings

log = logging.getLogger(__name__)

_client: AsyncOpenAI | None = None
_model: str = settings.genai.model

# Models offered in the settings menu. Any name the endpoint accepts can be set.
AVAILABLE_MODELS = [
    "gemini-2.0-flash",
    "gemini-2.0-flash-lite",
    "gemini-1.5-flash",
    "gemini-1.5-pro",
]


def get_client() -> AsyncOpenAI:
    global _client
    if _client is None:
        cfg = settings.genai
        _client = AsyncOpenAI(api_key=cfg.api_key, base_url=cfg.base_url)
    return _client


def get_model() -> str:
    return _model


def set_model(name: str) -> None:
    global _model
    _model = name
    log.info("Model changed to: %s", name)


async def complete(prompt: str) -> str:
    """Send a single-message chat completion and return the raw text."""
    client = get_client()
    resp = await client.chat.completions.create(
        model=_model,
        messages=[{"role": "user", "content": prompt}],
        temperature=settings.genai.temperature,
    )
    return resp.choices[0].message.content or ""
