"""
RIFT Output Package

Stage 3 of the pipeline: structural renderings of the expression tree
(LISP-style text, JSON, Graphviz DOT).

Author: xwest
"""

from .renderer import (
    OutputRenderer, JsonExporter, DotGraphRenderer,
    OutputStage, RenderedOutput, PRIMARY_FORMATS, render_ast
)

__all__ = [
    "OutputRenderer",
    "JsonExporter",
    "DotGraphRenderer",
    "OutputStage",
    "RenderedOutput",
    "PRIMARY_FORMATS",
    "render_ast",
]
