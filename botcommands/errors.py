from __future__ import annotations

from enum import StrEnum

CONTEXT_WINDOW = 10


class CommandError(Exception):
    """
    Base class for the errors raised while parsing bot commands.
    """


class DiagnosticError(CommandError):
    """
    An error located at a position of the parsed text.

    The message shows a window of the text around the position so the author of the comment can spot the
    offending part, e.g. ``...'labels' | error: quote in word at >| '": +bug. '...``.
    """

    def __init__(self, kind: StrEnum, text: str, position: int):
        self.kind = kind
        self.text = text
        self.position = position
        super().__init__(str(self))

    @property
    def message(self) -> str:
        return str(self.kind)

    def __str__(self) -> str:
        before = self.text[max(self.position - CONTEXT_WINDOW, 0) : self.position]
        after = self.text[self.position : self.position + CONTEXT_WINDOW]
        return f"...'{before}' | error: {self.message} at >| '{after}'..."

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind!r}, position={self.position})"


class LexErrorKind(StrEnum):
    UNTERMINATED_STRING = "unterminated string"
    QUOTE_IN_WORD = "quote in word"


class LexError(DiagnosticError):
    """
    The tokenizer could not classify the remaining input.
    """

    kind: LexErrorKind


class GrammarError(DiagnosticError):
    """
    A grammar recognized its keyword but rejected the arguments that follow it.

    Each grammar declares its own ``StrEnum`` of error kinds whose values are the user facing messages.
    """


class AmbiguousDispatchError(CommandError):
    """
    More than one grammar claimed the same command.

    Grammars must be mutually exclusive on their leading keyword, so this points at a misconfigured registry
    rather than at the text being parsed.
    """

    def __init__(self, grammars: list[str], text: str, position: int):
        self.grammars = grammars
        self.text = text
        self.position = position
        super().__init__(f"Command at position {position} was claimed by multiple grammars: {', '.join(grammars)}.")
