from botcommands.commands.grammars.relabel import RelabelErrorKind
from botcommands.errors import AmbiguousDispatchError, CommandError, GrammarError, LexError, LexErrorKind


class TestDiagnosticError:
    def test_message_shows_context(self):
        """Test that the message shows the text around the failing position."""
        text = '@bot modify labels": +bug. Afterwards'
        error = LexError(LexErrorKind.QUOTE_IN_WORD, text, 18)

        assert str(error) == "...'ify labels' | error: quote in word at >| '\": +bug. A'..."

    def test_message_at_the_start_of_the_text(self):
        """Test that the context window is clamped to the text."""
        error = GrammarError(RelabelErrorKind.EMPTY_LABEL, "+", 0)

        assert str(error) == "...'' | error: empty label at >| '+'..."

    def test_hierarchy(self):
        """Test that every error is a command error."""
        assert issubclass(LexError, CommandError)
        assert issubclass(GrammarError, CommandError)
        assert issubclass(AmbiguousDispatchError, CommandError)

    def test_repr(self):
        """Test the representation of a located error."""
        error = GrammarError(RelabelErrorKind.EMPTY_LABEL, "+", 0)

        assert repr(error) == "GrammarError(kind=<RelabelErrorKind.EMPTY_LABEL: 'empty label'>, position=0)"


class TestAmbiguousDispatchError:
    def test_message_names_the_grammars(self):
        """Test that the message lists the grammars that claimed the command."""
        error = AmbiguousDispatchError(["relabel", "other"], "@bot modify labels: +bug.", 0)

        assert str(error) == "Command at position 0 was claimed by multiple grammars: relabel, other."
        assert error.grammars == ["relabel", "other"]
