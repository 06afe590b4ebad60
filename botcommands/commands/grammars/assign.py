from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from botcommands.commands.base import CommandGrammar
from botcommands.commands.decorator import command_grammar
from botcommands.tokens import TokenKind

if TYPE_CHECKING:
    from botcommands.tokens import Tokenizer


class AssignAction(StrEnum):
    OWN = "own"
    RELEASE = "release"
    USER = "user"


class AssignCommand(BaseModel):
    """
    Change of the assignee of an issue or pull request.
    """

    action: AssignAction
    username: str | None = Field(default=None, description="User to assign, without the leading '@'.")


class AssignErrorKind(StrEnum):
    EXPECTED_END = "expected end of command"
    NO_USER = "expected a user to assign"
    MENTION_USER = "user should be mentioned, e.g. `@username`"


@command_grammar(kind="assign", usage="assign @username")
class AssignGrammar(CommandGrammar):
    """
    Parses ``claim``, ``release-assignment`` and ``assign [to] @user``.
    """

    description: str = (
        "Assigns a user, claims the issue for yourself with `claim` or drops it with `release-assignment`."
    )

    keywords = ("claim", "release-assignment", "assign")

    def parse(self, tokens: Tokenizer) -> AssignCommand | None:
        token = tokens.peek_token()
        if token is None or not token.is_word() or token.value not in self.keywords:
            return None
        tokens.next_token()

        if token.value == "claim":
            command = AssignCommand(action=AssignAction.OWN)
        elif token.value == "release-assignment":
            command = AssignCommand(action=AssignAction.RELEASE)
        else:
            command = AssignCommand(action=AssignAction.USER, username=self._parse_user(tokens))

        self._expect_end(tokens)
        return command

    def _parse_user(self, tokens: Tokenizer) -> str:
        tokens.eat(TokenKind.WORD, "to")

        user = tokens.peek_token()
        if user is None or user.is_end():
            raise tokens.error(AssignErrorKind.NO_USER)
        if not user.is_word() or not user.value.startswith("@") or len(user.value) == 1:
            raise tokens.error(AssignErrorKind.MENTION_USER)

        tokens.next_token()
        return user.value[1:]

    def _expect_end(self, tokens: Tokenizer) -> None:
        token = tokens.peek_token()
        if token is None:
            return
        if not token.is_end():
            raise tokens.error(AssignErrorKind.EXPECTED_END)
        tokens.next_token()
