from __future__ import annotations

import logging
import re

from markdown_it import MarkdownIt

logger = logging.getLogger("botcommands.code_blocks")

CODE_BLOCK_TOKENS = ("fence", "code_block")

# markdown-it counts "\r\n", "\r" and "\n" as line breaks when numbering lines
LINE_BREAK_RE = re.compile(r"\r\n?|\n")


class CodeBlocks:
    """
    Ranges of a Markdown text that are rendered as code: fenced and indented code blocks and inline code spans.

    Block structure comes from ``markdown-it-py``; inline code spans are located by scanning the source lines of
    every inline block, so the resulting ranges are offsets into the original text.
    """

    def __init__(self, text: str):
        self.text = text
        self._line_starts = self._compute_line_starts(text)
        self.spans: list[tuple[int, int]] = sorted(set(self._find_spans()))
        logger.debug("Found %d code spans: %r", len(self.spans), self.spans)

    def __repr__(self) -> str:
        return f"CodeBlocks(spans={self.spans!r})"

    def overlaps(self, start: int, end: int) -> tuple[int, int] | None:
        """
        Return the first code span intersecting the ``[start, end)`` range, if any.
        """
        for span_start, span_end in self.spans:
            if span_start >= end:
                break
            if start < span_end:
                return span_start, span_end
        return None

    def _find_spans(self):
        md = MarkdownIt("commonmark").enable("table")
        for token in md.parse(self.text):
            if token.map is None:
                continue
            start, end = self._line_range(*token.map)
            if token.type in CODE_BLOCK_TOKENS:
                yield start, end
            elif token.type == "inline":
                yield from find_inline_code(self.text, start, end)

    def _line_range(self, first_line: int, last_line: int) -> tuple[int, int]:
        start = self._line_starts[min(first_line, len(self._line_starts) - 1)]
        if last_line < len(self._line_starts):
            return start, self._line_starts[last_line]
        return start, len(self.text)

    @staticmethod
    def _compute_line_starts(text: str) -> list[int]:
        return [0] + [match.end() for match in LINE_BREAK_RE.finditer(text)]


def find_inline_code(text: str, start: int = 0, end: int | None = None):
    """
    Yield the ``(start, end)`` ranges of the backtick code spans found in ``text[start:end]``.

    A run of N backticks opens a span that is closed by the next run of exactly N backticks; an opening run
    without a closing one is literal text. Backticks escaped with a backslash never open a span.
    """
    end = len(text) if end is None else end
    index = start
    while index < end:
        char = text[index]
        # a backslash escapes the next character, so in `\\` the second backslash escapes nothing
        if char == "\\" and index + 1 < end:
            index += 2
            continue
        if char != "`":
            index += 1
            continue

        run_end = _backtick_run_end(text, index, end)
        run_length = run_end - index
        closing = _find_closing_run(text, run_end, end, run_length)
        if closing is None:
            index = run_end
            continue

        yield index, closing
        index = closing


def _backtick_run_end(text: str, index: int, end: int) -> int:
    while index < end and text[index] == "`":
        index += 1
    return index


def _find_closing_run(text: str, index: int, end: int, length: int) -> int | None:
    while index < end:
        index = text.find("`", index, end)
        if index == -1:
            return None
        run_end = _backtick_run_end(text, index, end)
        if run_end - index == length:
            return run_end
        index = run_end
    return None
