from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botcommands.code_blocks import CodeBlocks
from botcommands.conf import settings
from botcommands.errors import AmbiguousDispatchError, LexError
from botcommands.tokens import Tokenizer

from .base import CommandResult, OutcomeStatus
from .registry import grammar_registry

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .base import CommandGrammar

logger = logging.getLogger("botcommands.parser")


def find_command_start(text: str, bot: str, start: int = 0) -> int | None:
    """
    Find the first '@<bot>' mention in ``text`` at or after ``start``.
    """
    index = text.find(f"@{bot}", start)
    return None if index == -1 else index


class Input:
    """
    Streams the bot commands out of a comment, one per ``parse_next_command`` call.

    ``parsed`` marks the start of the text not scanned yet and only moves past successfully parsed commands. A
    rejected command leaves it untouched, so calling again returns the same rejection: callers must stop at the
    first result that is not ok. ``parse_commands`` implements that loop.
    """

    def __init__(self, text: str, bot: str | None = None, grammars: Iterable[CommandGrammar] | None = None):
        self.text = text
        self.bot = bot or settings.BOT_NAME
        self.marker = f"@{self.bot}"
        self.code = CodeBlocks(text)
        self.grammars = grammar_registry.get_grammars() if grammars is None else list(grammars)
        self._parsed = 0
        self._fault: CommandResult | None = None

    def __repr__(self) -> str:
        return f"Input(bot={self.bot!r}, parsed={self._parsed}, remaining={self.remaining[:20]!r})"

    @property
    def parsed(self) -> int:
        return self._parsed

    @property
    def consumed(self) -> str:
        return self.text[: self._parsed]

    @property
    def remaining(self) -> str:
        return self.text[self._parsed :]

    def parse_next_command(self) -> CommandResult:
        """
        Parse the next command after the cursor.

        Returns:
            The parsed command, the rejection of the grammar that recognized the command, an ambiguous result if
            several grammars recognized it, or a none result if there's no command left to parse.
        """
        if self._fault is not None:
            return self._fault

        tokens = self._find_marker()
        if tokens is None:
            return CommandResult.none()

        start = tokens.start
        logger.info("Identified potential command at position %d", start)

        outcomes = [grammar.attempt(tokens) for grammar in self.grammars]
        for outcome in outcomes:
            logger.info("Parsed %s command: %s %r", outcome.grammar, outcome.status, outcome.value or outcome.error)

        claims = [outcome for outcome in outcomes if outcome.claimed]
        if len(claims) > 1:
            error = AmbiguousDispatchError([claim.grammar for claim in claims], self.text, start)
            logger.warning("Refusing to dispatch: %s", error)
            self._fault = CommandResult.ambiguous(error)
            return self._fault

        end = max(tokens.position, claims[0].tokens.position) if claims else tokens.position
        if (span := self.code.overlaps(start, end)) is not None:
            logger.info("Command at %d..%d overlaps code at %d..%d", start, end, *span)
            return CommandResult.none()

        if not claims:
            return CommandResult.none()

        outcome = claims[0]
        if outcome.status == OutcomeStatus.MATCHED:
            self._parsed = outcome.tokens.position
        return CommandResult.from_outcome(outcome)

    def _find_marker(self) -> Tokenizer | None:
        """
        Find the next standalone bot mention, returning a tokenizer positioned right after it.

        Mentions preceded by a word character or '@' (e.g. e-mail addresses) and mentions that are a prefix of a
        longer word (e.g. '@bother' for 'bot') are skipped.
        """
        index = self._parsed
        while (index := find_command_start(self.text, self.bot, index)) is not None:
            if index == 0 or not self._continues_word(self.text[index - 1]):
                tokens = Tokenizer(self.text, index)
                try:
                    token = tokens.next_token()
                except LexError:
                    token = None
                if token is not None and token.is_word(self.marker):
                    return tokens
            index += 1
        return None

    @staticmethod
    def _continues_word(char: str) -> bool:
        return char.isalnum() or char in "_@"


def parse_commands(
    text: str, bot: str | None = None, grammars: Iterable[CommandGrammar] | None = None
) -> Iterator[CommandResult]:
    """
    Yield the commands of ``text`` in order.

    Stops when there are no more commands, and right after yielding a rejected or ambiguous result since the
    cursor does not move past those.

    Args:
        text: The full text of the comment.
        bot: The bot handle, defaults to ``settings.BOT_NAME``.
        grammars: The grammars to dispatch to, defaults to the registered ones.
    """
    parser = Input(text, bot=bot, grammars=grammars)
    while not (result := parser.parse_next_command()).is_none():
        yield result
        if result.is_err():
            return
