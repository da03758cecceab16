import time

from sqlfragment.compiler.compiled_query import CompiledQuery
from sqlfragment.config import FragmentSettings
from sqlfragment.fragment.models import Fragment
from sqlfragment.observability import CompileObservation, ObservabilitySettings

# ==================================================
# Placeholder Compiler
# ==================================================


class PlaceholderCompiler:
    """
    Compiles a Fragment into SQL text with numbered placeholders and a parameter list.
    """

    def __init__(
        self,
        settings: FragmentSettings | None = None,
        observability_settings: ObservabilitySettings | None = None,
    ) -> None:
        self.settings = settings or FragmentSettings()
        self.observability_settings = observability_settings or ObservabilitySettings()

    def compile(self, fragment: Fragment) -> CompiledQuery:
        """
        The main entry point for compiling a fragment.
        """
        started = time.perf_counter()
        compiled: CompiledQuery | None = None
        error: Exception | None = None
        try:
            compiled = self._compile(fragment)
            return compiled
        except Exception as exc:
            error = exc
            raise
        finally:
            self._observe(compiled, error, (time.perf_counter() - started) * 1000)

    def _compile(self, fragment: Fragment) -> CompiledQuery:
        # Work on a copy so the text and params come from the same state.
        snapshot = fragment.clone()
        prefix = self.settings.placeholder_prefix
        if self.settings.pretty:
            text = snapshot.to_pretty_string(prefix)
        else:
            text = snapshot.render(prefix)
        return CompiledQuery(sql=text, params=list(snapshot.values))

    def _observe(self, compiled: CompiledQuery | None, error: Exception | None, duration_ms: float) -> None:
        observer = self.observability_settings.compile_observer
        if observer is None:
            return
        observer(
            CompileObservation(
                placeholder_prefix=self.settings.placeholder_prefix,
                sql=compiled.sql if compiled is not None else "",
                param_count=len(compiled.params) if compiled is not None else 0,
                duration_ms=duration_ms,
                succeeded=error is None,
                metadata=dict(self.observability_settings.metadata),
                error_type=type(error).__name__ if error is not None else None,
                error_message=str(error) if error is not None else None,
            )
        )


def compile_fragment(
    fragment: Fragment,
    settings: FragmentSettings | None = None,
    observability_settings: ObservabilitySettings | None = None,
) -> CompiledQuery:
    """
    Compiles a fragment with a one-off PlaceholderCompiler.
    """
    return PlaceholderCompiler(settings, observability_settings).compile(fragment)
