from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from botcommands.errors import AmbiguousDispatchError, CommandError, DiagnosticError, GrammarError, LexError

if TYPE_CHECKING:
    from botcommands.tokens import Tokenizer


class OutcomeStatus(StrEnum):
    NOT_MINE = "not mine"
    MATCHED = "matched"
    REJECTED = "rejected"


@dataclass
class Outcome:
    """
    Result of one grammar attempting to parse the tokens after the bot mention.
    """

    grammar: str
    status: OutcomeStatus
    tokens: Tokenizer
    value: Any = None
    error: DiagnosticError | None = None

    @property
    def claimed(self) -> bool:
        return self.status != OutcomeStatus.NOT_MINE


class CommandGrammar(ABC):
    """
    Base class for command grammars, one per command kind.
    """

    kind: str
    usage: str
    description: str

    def help(self, bot_name: str) -> str:
        """
        Get the help message for the command.
        """
        return f" * `@{bot_name} {self.usage}` - {self.description}"

    def attempt(self, tokens: Tokenizer) -> Outcome:
        """
        Parse a command of this kind on an independent copy of ``tokens``.

        Lexing errors hit once the keyword is consumed belong to this grammar and are reported as a rejection. A
        lexing error on the very first token means the keyword could not be recognized, so nothing is claimed.
        """
        tokens = tokens.copy()
        start = tokens.position
        try:
            value = self.parse(tokens)
        except LexError as err:
            if tokens.position == start:
                return Outcome(grammar=self.kind, status=OutcomeStatus.NOT_MINE, tokens=tokens)
            return Outcome(grammar=self.kind, status=OutcomeStatus.REJECTED, tokens=tokens, error=err)
        except GrammarError as err:
            return Outcome(grammar=self.kind, status=OutcomeStatus.REJECTED, tokens=tokens, error=err)

        if value is None:
            return Outcome(grammar=self.kind, status=OutcomeStatus.NOT_MINE, tokens=tokens)
        return Outcome(grammar=self.kind, status=OutcomeStatus.MATCHED, tokens=tokens, value=value)

    @abstractmethod
    def parse(self, tokens: Tokenizer) -> Any | None:
        """
        Use this method to implement the grammar of the command.

        Return ``None`` without consuming anything when the tokens don't start with the command keyword. Once the
        keyword is consumed, either advance ``tokens`` to the end of the command and return the parsed value or
        raise a ``GrammarError``; returning ``None`` at that point is not allowed.

        Args:
            tokens: Tokenizer positioned right after the bot mention.

        Returns:
            The parsed command or ``None``.
        """


class ResultKind(StrEnum):
    NONE = "none"
    MATCHED = "matched"
    REJECTED = "rejected"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of looking for the next command in a text.
    """

    kind: ResultKind
    grammar: str | None = None
    value: Any = None
    error: CommandError | None = None

    @classmethod
    def none(cls) -> CommandResult:
        return cls(kind=ResultKind.NONE)

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> CommandResult:
        if outcome.status == OutcomeStatus.MATCHED:
            return cls(kind=ResultKind.MATCHED, grammar=outcome.grammar, value=outcome.value)
        return cls(kind=ResultKind.REJECTED, grammar=outcome.grammar, error=outcome.error)

    @classmethod
    def ambiguous(cls, error: AmbiguousDispatchError) -> CommandResult:
        return cls(kind=ResultKind.AMBIGUOUS, error=error)

    def is_ok(self) -> bool:
        """
        Whether a command was parsed successfully or no command was found.
        """
        return self.kind in (ResultKind.NONE, ResultKind.MATCHED)

    def is_err(self) -> bool:
        return not self.is_ok()

    def is_none(self) -> bool:
        return self.kind == ResultKind.NONE

    def is_ambiguous(self) -> bool:
        return self.kind == ResultKind.AMBIGUOUS
