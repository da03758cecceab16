from sqlfragment.fragment import (
    DEFAULT_PLACEHOLDER_PREFIX,
    Fragment,
    build,
    identifier,
    is_fragment,
    join,
    join_queries,
    sql,
)
from sqlfragment.compiler import CompiledQuery, PlaceholderCompiler, compile_fragment
from sqlfragment.config import FragmentSettings, load_settings
from sqlfragment.errors import FragmentError, FragmentInvariantError, InvariantDetails
from sqlfragment.observability import (
    CompileObservation,
    InMemoryCompileMetrics,
    MetricPoint,
    ObservabilitySettings,
    compose_observers,
    make_json_observation_logger,
    observation_to_dict,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_PLACEHOLDER_PREFIX",
    "Fragment",
    "build",
    "identifier",
    "is_fragment",
    "join",
    "join_queries",
    "sql",
    "CompiledQuery",
    "PlaceholderCompiler",
    "compile_fragment",
    "FragmentSettings",
    "load_settings",
    "FragmentError",
    "FragmentInvariantError",
    "InvariantDetails",
    "CompileObservation",
    "InMemoryCompileMetrics",
    "MetricPoint",
    "ObservabilitySettings",
    "compose_observers",
    "make_json_observation_logger",
    "observation_to_dict",
]
