import logging

from sqlfragment import (
    CompileObservation,
    InMemoryCompileMetrics,
    ObservabilitySettings,
    PlaceholderCompiler,
    compose_observers,
    make_json_observation_logger,
    sql,
)

logging.basicConfig(level=logging.INFO)
events_logger = logging.getLogger("sqlfragment.compile")


def log_compile(observation: CompileObservation) -> None:
    print(
        f"[{observation.placeholder_prefix}] success={observation.succeeded} "
        f"duration_ms={observation.duration_ms:.3f} params={observation.param_count} "
        f"metadata={dict(observation.metadata)}"
    )


metrics = InMemoryCompileMetrics()
compiler = PlaceholderCompiler(
    observability_settings=ObservabilitySettings(
        compile_observer=compose_observers(
            log_compile,
            make_json_observation_logger(logger=events_logger),
            metrics,
        ),
        metadata={"service": "sqlfragment-sample"},
    ),
)

compiler.compile(sql("SELECT name FROM person WHERE id = ", 1))
compiler.compile(sql("SELECT name FROM person WHERE age > ", 30, " AND city = ", "Oslo"))

for point in metrics.counters():
    print(point)
