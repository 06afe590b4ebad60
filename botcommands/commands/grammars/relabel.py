from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from botcommands.commands.base import CommandGrammar
from botcommands.commands.decorator import command_grammar
from botcommands.tokens import TokenKind

if TYPE_CHECKING:
    from botcommands.tokens import Tokenizer


class LabelAction(StrEnum):
    ADD = "add"
    REMOVE = "remove"


class LabelDelta(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: LabelAction = Field(description="Whether the label is added or removed.")
    label: str = Field(description="Name of the label.")


class RelabelCommand(BaseModel):
    """
    Labels to add to and remove from an issue or pull request.
    """

    deltas: list[LabelDelta] = Field(min_length=1)


class RelabelErrorKind(StrEnum):
    EXPECTED_LABELS = "expected `labels` after `modify`"
    EXPECTED_LABEL_DELTA = "expected a label to add (`+label`) or remove (`-label`)"
    EMPTY_LABEL = "empty label"
    MISLEADING_TO = "`to` is misleading when removing labels, use `modify labels: ...`"


@command_grammar(kind="relabel", usage="modify labels: +bug -feature")
class RelabelGrammar(CommandGrammar):
    """
    Parses ``modify labels[:] [to][:] <delta> [[,] [and] <delta>]...`` terminated by a dot, a semicolon or a line
    break, where a delta is ``+label``, ``-label`` or a bare or quoted label to add.
    """

    description: str = "Adds and removes labels."

    def parse(self, tokens: Tokenizer) -> RelabelCommand | None:
        if not tokens.eat(TokenKind.WORD, "modify"):
            return None

        if not tokens.eat(TokenKind.WORD, "labels"):
            raise tokens.error(RelabelErrorKind.EXPECTED_LABELS)

        tokens.eat(TokenKind.COLON)
        uses_to = tokens.eat(TokenKind.WORD, "to")
        tokens.eat(TokenKind.COLON)

        deltas_start = tokens.snapshot()
        deltas = [self._parse_delta(tokens)]
        while True:
            tokens.eat(TokenKind.COMMA)
            tokens.eat(TokenKind.WORD, "and")
            token = tokens.peek_token()
            if token is None:
                break
            if token.is_end():
                tokens.next_token()
                break
            deltas.append(self._parse_delta(tokens))

        if uses_to and any(delta.action == LabelAction.REMOVE for delta in deltas):
            tokens.restore(deltas_start)
            raise tokens.error(RelabelErrorKind.MISLEADING_TO)

        return RelabelCommand(deltas=deltas)

    def _parse_delta(self, tokens: Tokenizer) -> LabelDelta:
        token = tokens.peek_token()
        if token is None or token.kind not in (TokenKind.WORD, TokenKind.QUOTE):
            raise tokens.error(RelabelErrorKind.EXPECTED_LABEL_DELTA)

        if token.kind == TokenKind.QUOTE:
            tokens.next_token()
            return LabelDelta(action=LabelAction.ADD, label=unescape(token.value))

        action, label = LabelAction.ADD, token.value
        if label[0] in "+-":
            action = LabelAction.REMOVE if label[0] == "-" else LabelAction.ADD
            label = label[1:]
        if not label:
            raise tokens.error(RelabelErrorKind.EMPTY_LABEL)

        tokens.next_token()
        return LabelDelta(action=action, label=label)


def unescape(value: str) -> str:
    return value.replace('\\"', '"').replace("\\\\", "\\")
