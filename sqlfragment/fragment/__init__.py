from sqlfragment.fragment.models import DEFAULT_PLACEHOLDER_PREFIX, Fragment
from sqlfragment.fragment.builders import (
    build,
    identifier,
    is_fragment,
    join,
    join_queries,
    sql,
)

__all__ = [
    "DEFAULT_PLACEHOLDER_PREFIX",
    "Fragment",
    "build",
    "identifier",
    "is_fragment",
    "join",
    "join_queries",
    "sql",
]
