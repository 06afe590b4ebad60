from botcommands.commands.base import CommandResult
from botcommands.commands.parser import Input
from botcommands.commands.templates import render_error, render_help
from botcommands.errors import AmbiguousDispatchError


class TestRenderHelp:
    def test_lists_registered_commands(self):
        """Test that the help lists every registered command."""
        message = render_help("bot")

        assert message.startswith("### 🤖 bot Commands")
        assert " * `@bot modify labels: +bug -feature` - Adds and removes labels." in message
        assert " * `@bot assign @username` - " in message


class TestRenderError:
    def test_rejected_command(self):
        """Test the reply to a rejected command."""
        result = Input("@bot assign alice", "bot").parse_next_command()

        message = render_error("bot", result)

        assert "Invalid `assign` Command" in message
        assert str(result.error) in message
        assert " * `@bot assign @username` - " in message

    def test_ambiguous_command(self):
        """Test the reply to an ambiguous command."""
        result = CommandResult.ambiguous(AmbiguousDispatchError(["relabel", "modify"], "", 0))

        message = render_error("bot", result)

        assert "Ambiguous Command" in message
        assert "(relabel, modify)" in message

    def test_no_error(self):
        """Test that there is nothing to reply to successful or missing commands."""
        assert render_error("bot", CommandResult.none()) is None
        assert render_error("bot", Input("@bot claim", "bot").parse_next_command()) is None
