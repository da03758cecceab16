from dataclasses import dataclass, field
from typing import Any

# ==================================================
# Compiled Output
# ==================================================

@dataclass
class CompiledQuery:
    """
    SQL text with positional placeholders plus the parameters they refer to.

    ``params[i]`` is the value for placeholder ``i + 1``.
    """
    sql: str
    params: list[Any] = field(default_factory=list)
