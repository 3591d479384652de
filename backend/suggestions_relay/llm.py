"""LLM factory utilities."""

from langchain_google_genai import ChatGoogleGenerativeAI

from .config import Settings, get_settings


def build_llm(settings: Settings | None = None) -> ChatGoogleGenerativeAI:
    """Build a Gemini chat model instance using the provided settings."""
    resolved = settings or get_settings()
    kwargs = {}
    if resolved.temperature is not None:
        kwargs["temperature"] = resolved.temperature
    return ChatGoogleGenerativeAI(
        model=resolved.gemini_model,
        google_api_key=resolved.google_api_key,
        **kwargs,
    )
