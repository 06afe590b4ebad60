import pytest

from botcommands.commands.base import OutcomeStatus
from botcommands.commands.grammars.relabel import LabelAction, LabelDelta, RelabelErrorKind, RelabelGrammar
from botcommands.errors import LexError
from botcommands.tokens import Tokenizer

ADD, REMOVE = LabelAction.ADD, LabelAction.REMOVE


def parse(text: str):
    tokens = Tokenizer(text)
    return RelabelGrammar().parse(tokens), tokens


class TestRelabelGrammar:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("modify labels: +bug.", [(ADD, "bug")]),
            ("modify labels +bug", [(ADD, "bug")]),
            ("modify labels to +bug", [(ADD, "bug")]),
            ("modify labels to: bug", [(ADD, "bug")]),
            ("modify labels: -bug +feature", [(REMOVE, "bug"), (ADD, "feature")]),
            ("modify labels: -bug, +feature;", [(REMOVE, "bug"), (ADD, "feature")]),
            ("modify labels: +bug and -feature", [(ADD, "bug"), (REMOVE, "feature")]),
            ("modify labels: +bug, and -feature.", [(ADD, "bug"), (REMOVE, "feature")]),
            ('modify labels: "good first issue"', [(ADD, "good first issue")]),
            ("modify labels: +A-bug +T-compiler", [(ADD, "A-bug"), (ADD, "T-compiler")]),
        ],
    )
    def test_deltas(self, text, expected):
        """Test the deltas parsed from different spellings of the command."""
        command, _tokens = parse(text)

        assert command.deltas == [LabelDelta(action=action, label=label) for action, label in expected]

    def test_stops_at_the_end_of_the_command(self):
        """Test that the tokens are left right after the terminator."""
        _command, tokens = parse("modify labels: +bug. Afterwards, delete the world.")

        assert tokens.text[tokens.position :] == " Afterwards, delete the world."

    def test_stops_at_the_end_of_the_line(self):
        """Test that a line break terminates the command."""
        command, tokens = parse("modify labels: +bug\nnot a label")

        assert command.deltas == [LabelDelta(action=ADD, label="bug")]
        assert tokens.text[tokens.position :] == "not a label"

    @pytest.mark.parametrize("text", ["assign @user", "modifying labels: +bug", "", "labels: +bug"])
    def test_not_mine(self, text):
        """Test that other commands are not claimed and nothing is consumed."""
        command, tokens = parse(text)

        assert command is None
        assert tokens.position == 0

    @pytest.mark.parametrize(
        ("text", "kind", "position"),
        [
            ("modify title: foo", RelabelErrorKind.EXPECTED_LABELS, 6),
            ("modify labels:", RelabelErrorKind.EXPECTED_LABEL_DELTA, 14),
            ("modify labels: .", RelabelErrorKind.EXPECTED_LABEL_DELTA, 14),
            ("modify labels: +", RelabelErrorKind.EMPTY_LABEL, 14),
            ("modify labels: +bug, -", RelabelErrorKind.EMPTY_LABEL, 20),
            ("modify labels to -bug", RelabelErrorKind.MISLEADING_TO, 16),
        ],
    )
    def test_errors(self, text, kind, position):
        """Test that malformed arguments are rejected with a located error."""
        outcome = RelabelGrammar().attempt(Tokenizer(text))

        assert outcome.status == OutcomeStatus.REJECTED
        assert outcome.error.kind == kind
        assert outcome.error.position == position

    def test_lexing_error_after_keyword_is_a_rejection(self):
        """Test that a lexing error once the keyword is consumed is a rejection of the command."""
        outcome = RelabelGrammar().attempt(Tokenizer('modify labels": +bug.'))

        assert outcome.status == OutcomeStatus.REJECTED
        assert isinstance(outcome.error, LexError)
