"""Business logic for generating writing suggestions."""

from __future__ import annotations

from typing import Any, Literal

from .config import Settings, get_settings
from .prompts import build_suggestion_chain


class SuggestionError(RuntimeError):
    """Raised when the service cannot obtain suggestions from the LLM."""


class SuggestionService:
    """Encapsulates the LangChain pipeline for text improvement suggestions."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        chain=None,
    ) -> None:
        self.settings = settings or get_settings()
        if chain is not None:
            self._chain = chain
        else:
            self._chain = build_suggestion_chain(self.settings)

    def suggest(self, content: Any) -> list[str]:
        """Return suggestions for ``content`` synchronously."""
        try:
            text = self._chain.invoke({"content": content})
            return _split_suggestions(text, trailing=self.settings.trailing_line)
        except Exception as exc:
            raise SuggestionError("Unable to generate suggestions") from exc

    async def asuggest(self, content: Any) -> list[str]:
        """Return suggestions for ``content`` asynchronously."""
        try:
            text = await self._chain.ainvoke({"content": content})
            return _split_suggestions(text, trailing=self.settings.trailing_line)
        except Exception as exc:
            raise SuggestionError("Unable to generate suggestions") from exc


def _split_suggestions(
    text: str,
    *,
    trailing: Literal["always", "blank"] = "always",
) -> list[str]:
    """Split a raw reply into trimmed lines and drop the trailing one.

    With ``trailing="always"`` the last line is removed even when it holds a
    real suggestion; ``"blank"`` only removes it when it is empty.
    """

    lines = [line.strip() for line in text.split("\n")]
    if trailing == "always" or (lines and not lines[-1]):
        lines = lines[:-1]
    return lines
