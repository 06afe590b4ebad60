from .commands import CommandGrammar, CommandResult, Input, ResultKind, command_grammar, parse_commands
from .errors import AmbiguousDispatchError, CommandError, GrammarError, LexError

__all__ = [
    "AmbiguousDispatchError",
    "CommandError",
    "CommandGrammar",
    "CommandResult",
    "GrammarError",
    "Input",
    "LexError",
    "ResultKind",
    "command_grammar",
    "parse_commands",
]
