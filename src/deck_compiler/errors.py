"""Exceptions raised while loading inputs and driving the Slides API."""

from __future__ import annotations

from typing import Iterable, Optional


class DeckCompilerError(Exception):
    """Base class for errors reported by the CLI as a single message."""


class InputParseError(DeckCompilerError, ValueError):
    """Raised when a config, template, data or review document cannot be parsed."""

    def __init__(self, source: Optional[str], issues: Iterable[str]):
        self.source = source
        self.issues = [str(i).strip() for i in issues if str(i).strip()]
        if not self.issues:
            self.issues = ["Invalid document"]
        super().__init__(self._format())

    def _format(self) -> str:
        where = f" in {self.source}" if self.source else ""
        if len(self.issues) == 1:
            return f"Could not parse input{where}: {self.issues[0]}"
        lines = [f"Could not parse input{where}:"]
        for issue in self.issues:
            lines.append(f"- {issue}")
        return "\n".join(lines)


class MissingArgumentError(DeckCompilerError):
    """Raised when a CLI mode is missing a companion argument."""


class NoInputError(DeckCompilerError):
    """Raised when review data is expected on stdin but stdin is a terminal."""


class AuthError(DeckCompilerError):
    """Raised when no usable OAuth credentials are available."""
