"""
Prompts package - Compiles search parameters into provider instructions
"""

from .base import CompiledQuery, DEFAULT_DISPLAY_LANGUAGE
from .flight_query import compile_flight_query
from .guide_query import compile_guide_query

__all__ = [
    "CompiledQuery",
    "DEFAULT_DISPLAY_LANGUAGE",
    "compile_flight_query",
    "compile_guide_query"
]
