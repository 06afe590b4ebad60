from __future__ import annotations

from inspect import isclass

from .base import CommandGrammar


class GrammarRegistry:
    """
    Registry that keeps track of the registered command grammars, in registration order.
    """

    def __init__(self):
        self._registry: dict[str, type[CommandGrammar]] = {}

    def register(self, grammar_cls: type[CommandGrammar], kind: str, usage: str) -> None:
        """
        Register a command grammar class.

        Args:
            grammar_cls: The command grammar class to register.
            kind: The kind of command the grammar parses.
            usage: How the command is written after the bot mention.
        """
        assert isclass(grammar_cls) and issubclass(grammar_cls, CommandGrammar), (
            f"{grammar_cls} must be a class that inherits from CommandGrammar"
        )
        assert grammar_cls not in self._registry.values(), f"{grammar_cls.__name__} is already registered."
        assert kind not in self._registry, f"{kind} is already registered."

        grammar_cls.kind = kind
        grammar_cls.usage = usage

        self._registry[kind] = grammar_cls

    def get_grammars(self, kind: str | None = None) -> list[CommandGrammar]:
        """
        Get instances of the registered grammars.

        Args:
            kind: Only return the grammar registered for this kind.

        Returns:
            List of command grammars, in registration order.
        """
        if kind is None:
            return [grammar_cls() for grammar_cls in self._registry.values()]
        if grammar_cls := self._registry.get(kind):
            return [grammar_cls()]
        return []


grammar_registry = GrammarRegistry()
