from sqlfragment.compiler.compiled_query import CompiledQuery
from sqlfragment.compiler.placeholder_compiler import PlaceholderCompiler, compile_fragment

__all__ = [
    "CompiledQuery",
    "PlaceholderCompiler",
    "compile_fragment",
]
