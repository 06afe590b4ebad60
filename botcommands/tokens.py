from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from .errors import GrammarError, LexError, LexErrorKind

if TYPE_CHECKING:
    from collections.abc import Iterator


class TokenKind(StrEnum):
    WORD = "word"
    QUOTE = "quote"
    DOT = "."
    COMMA = ","
    SEMI = ";"
    EXCLAMATION = "!"
    QUESTION = "?"
    COLON = ":"
    END_OF_LINE = "end of line"


PUNCTUATION = {
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMI,
    "!": TokenKind.EXCLAMATION,
    "?": TokenKind.QUESTION,
    ":": TokenKind.COLON,
}

NEWLINES = "\r\n"


@dataclass(frozen=True, slots=True)
class Token:
    """
    A lexical token, stored as a ``[start, end)`` range into the text it was read from.
    """

    kind: TokenKind
    start: int
    end: int
    source: str = field(repr=False, compare=False)

    @property
    def value(self) -> str:
        """
        The text of the token. Quotes are returned without the surrounding double quotes.
        """
        if self.kind == TokenKind.QUOTE:
            return self.source[self.start + 1 : self.end - 1]
        return self.source[self.start : self.end]

    def is_word(self, word: str | None = None) -> bool:
        return self.kind == TokenKind.WORD and (word is None or self.value == word)

    def is_end(self) -> bool:
        """
        Whether the token terminates a command: a dot, a semicolon or a line break.
        """
        return self.kind in (TokenKind.DOT, TokenKind.SEMI, TokenKind.END_OF_LINE)


class Tokenizer:
    """
    Lazy tokenizer over a slice of a text, starting at ``offset``.

    The whole state is a single offset into the shared text, so ``copy`` and ``snapshot`` are O(1) and a grammar
    can parse speculatively on a copy and simply drop it on failure.
    """

    def __init__(self, text: str, offset: int = 0):
        self.text = text
        self.start = offset
        self._offset = offset

    def __repr__(self) -> str:
        return f"Tokenizer(position={self._offset}, rest={self.text[self._offset : self._offset + 20]!r})"

    def __copy__(self) -> Tokenizer:
        return self.copy()

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    @property
    def position(self) -> int:
        """
        Offset in the text right after the last token returned.
        """
        return self._offset

    @property
    def consumed(self) -> str:
        """
        Everything consumed since the tokenizer was created.
        """
        return self.text[self.start : self._offset]

    def copy(self) -> Tokenizer:
        tokenizer = Tokenizer(self.text, self.start)
        tokenizer._offset = self._offset
        return tokenizer

    def snapshot(self) -> int:
        return self._offset

    def restore(self, snapshot: int) -> None:
        self._offset = snapshot

    def error(self, kind: StrEnum) -> GrammarError:
        """
        Build a grammar error located at the current position.
        """
        return GrammarError(kind, self.text, self._offset)

    def peek_token(self) -> Token | None:
        snapshot = self.snapshot()
        try:
            return self.next_token()
        finally:
            self.restore(snapshot)

    def eat(self, kind: TokenKind, word: str | None = None) -> bool:
        """
        Consume the next token if it is of the given kind (and is the given word), returning whether it was.
        """
        token = self.peek_token()
        if token is None or token.kind != kind or (word is not None and token.value != word):
            return False
        self.next_token()
        return True

    def next_token(self) -> Token | None:
        """
        Return the next token, or ``None`` at the end of the input.

        Raises:
            LexError: If the next token is an unterminated quote or a word with a quote in it.
        """
        text = self.text
        start = self._skip_blanks(self._offset)
        if start >= len(text):
            return None

        char = text[start]
        if char in NEWLINES:
            end = self._consume_newlines(start)
            kind = TokenKind.END_OF_LINE
        elif char in PUNCTUATION:
            end = start + 1
            kind = PUNCTUATION[char]
        elif char == '"':
            end = self._consume_quote(start)
            kind = TokenKind.QUOTE
        else:
            end = self._consume_word(start)
            kind = TokenKind.WORD

        self._offset = end
        return Token(kind=kind, start=start, end=end, source=text)

    def _skip_blanks(self, index: int) -> int:
        text = self.text
        while index < len(text) and text[index].isspace() and text[index] not in NEWLINES:
            index += 1
        return index

    def _consume_newlines(self, index: int) -> int:
        """
        Consume a run of line breaks, possibly separated by blanks, up to the last line break.
        """
        text = self.text
        end = index
        while index < len(text) and text[index].isspace():
            if text[index] in NEWLINES:
                end = index + 1
            index += 1
        return end

    def _consume_quote(self, index: int) -> int:
        text = self.text
        cursor = index + 1
        while cursor < len(text):
            char = text[cursor]
            if char == "\\":
                cursor += 2
                continue
            if char == '"':
                return cursor + 1
            cursor += 1
        raise LexError(LexErrorKind.UNTERMINATED_STRING, text, index)

    def _consume_word(self, index: int) -> int:
        text = self.text
        while index < len(text):
            char = text[index]
            if char.isspace():
                break
            if char == '"':
                raise LexError(LexErrorKind.QUOTE_IN_WORD, text, index)
            # punctuation belongs to the word unless it ends it, e.g. "v1.2" vs "bug."
            if char in PUNCTUATION and self._ends_word(index + 1):
                break
            index += 1
        return index

    def _ends_word(self, index: int) -> bool:
        return index >= len(self.text) or self.text[index].isspace() or self.text[index] in PUNCTUATION
