# Built-in grammars register themselves on import.
from . import assign, relabel  # noqa: F401
