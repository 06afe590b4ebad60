from __future__ import annotations

from typing import TYPE_CHECKING

from jinja2 import Template

from .base import ResultKind
from .registry import grammar_registry

if TYPE_CHECKING:
    from .base import CommandResult

COMMANDS_HELP_TEMPLATE = """### 🤖 {{ bot_name }} Commands
Comment any of the commands below to trigger the bot:

{% for command in commands -%}
  {{ command }}
{% endfor -%}
"""

INVALID_COMMAND_TEMPLATE = """### ⚠️ Invalid `{{ kind }}` Command

I couldn't understand the command in your comment:

```
{{ error }}
```

**Here's how to use it correctly:**

{{ help }}
"""

AMBIGUOUS_COMMAND_TEMPLATE = """### ❌ Ambiguous Command

The command in your comment is recognized by more than one command ({{ grammars | join(", ") }}), so I didn't run
any of them. This is a problem with the bot configuration, please report it to the bot maintainers.
"""


def render_help(bot_name: str) -> str:
    """
    Render the help message listing the registered commands.
    """
    commands = [grammar.help(bot_name) for grammar in grammar_registry.get_grammars()]
    return Template(COMMANDS_HELP_TEMPLATE).render(bot_name=bot_name, commands=commands)


def render_error(bot_name: str, result: CommandResult) -> str | None:
    """
    Render the reply to a command that couldn't be dispatched.

    Args:
        bot_name: The bot handle.
        result: The result of parsing the command.

    Returns:
        The reply, or ``None`` if the result is not an error.
    """
    if result.kind == ResultKind.AMBIGUOUS:
        return Template(AMBIGUOUS_COMMAND_TEMPLATE).render(grammars=result.error.grammars)
    if result.kind != ResultKind.REJECTED:
        return None

    help_messages = [grammar.help(bot_name) for grammar in grammar_registry.get_grammars(kind=result.grammar)]
    return Template(INVALID_COMMAND_TEMPLATE).render(
        bot_name=bot_name, kind=result.grammar, error=str(result.error), help="\n".join(help_messages)
    )
