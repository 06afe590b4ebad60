from __future__ import annotations

from typing import TYPE_CHECKING

from .registry import grammar_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from .base import CommandGrammar


def command_grammar(kind: str, usage: str) -> Callable[[type[CommandGrammar]], type[CommandGrammar]]:
    """
    Decorator to register a command grammar.

    Usage:
        @command_grammar(kind="relabel", usage="modify labels: +bug -feature")
        class RelabelGrammar(CommandGrammar):
            # ... implementation

    Args:
        kind: The kind of command the grammar parses.
        usage: How the command is written after the bot mention.

    Returns:
        The command grammar class.
    """

    def decorator(cls: type[CommandGrammar]) -> type[CommandGrammar]:
        grammar_registry.register(cls, kind, usage)
        return cls

    return decorator
