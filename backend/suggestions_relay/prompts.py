"""Prompt utilities for the suggestions relay (Gemini-backed).

Env:
  GOOGLE_API_KEY=<your key>
"""

import logging
from typing import Any

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate

from .config import Settings, get_settings
from .llm import build_llm

logger = logging.getLogger(__name__)


# The quotes and the bare line break after "separated by" are part of the
# prompt the model has always been sent.
PROMPT_TEMPLATE = PromptTemplate.from_template(
    '"Please review the following text and provide exactly three improvement '
    "suggestions. Each suggestion should be in a separate sentence and "
    "separated by \n.\n"
    "Text: {content}\n"
    'Suggestions (3 sentences, one per line):"'
)


def build_prompt(content: Any) -> str:
    """Render the instruction prompt for ``content``.

    The value is interpolated as a single block; anything that is not a string
    is rendered with ``str()`` so a missing field shows up as ``None``.
    """
    return PROMPT_TEMPLATE.format(content=content)


def build_suggestion_chain(settings: Settings | None = None):
    """Create the runnable chain (prompt -> Gemini -> plain text)."""
    resolved = settings or get_settings()
    logger.info("Building suggestion chain for model %s", resolved.gemini_model)
    return PROMPT_TEMPLATE | build_llm(resolved) | StrOutputParser()
