from . import grammars  # noqa: F401
from .base import CommandGrammar, CommandResult, Outcome, OutcomeStatus, ResultKind
from .decorator import command_grammar
from .parser import Input, find_command_start, parse_commands
from .registry import GrammarRegistry, grammar_registry

__all__ = [
    "CommandGrammar",
    "CommandResult",
    "GrammarRegistry",
    "Input",
    "Outcome",
    "OutcomeStatus",
    "ResultKind",
    "command_grammar",
    "find_command_start",
    "grammar_registry",
    "parse_commands",
]
