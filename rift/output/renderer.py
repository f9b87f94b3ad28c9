"""
RIFT stage 3 - output rendering.

The primary format is a LISP-style nested-parenthesis dump of the tree,
two spaces of indentation per level, wrapped in an (AST ...) envelope:

    (AST
      (BinOp +
        (Identifier x)
        (Number 2)
      )
    )

JSON export and a Graphviz DOT graph are also available. None of these
formats are meant to be parsed back.

Author: xwest
"""

import json
import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..governance.config import OutputSettings
from ..governance.errors import create_unsupported_format_error
from ..parser.ast_nodes import ASTNode, ASTVisitor, BinaryOp, Identifier, Number, UnaryOp

logger = logging.getLogger(__name__)

INDENT = "  "

# Interpreter frames the json encoder may use per level of nesting.
JSON_FRAMES_PER_LEVEL = 4


class OutputRenderer:
    """
    Canonical LISP-style renderer. Holds no state between calls.

    Walks the tree with an explicit stack, so a left-deep chain of a few
    thousand operators renders like any other tree.
    """

    def render(self, root: Optional[ASTNode]) -> str:
        lines = ["(AST"]
        if root is not None:
            self._render_tree(root, lines)
        lines.append(")")
        return "\n".join(lines) + "\n"

    def _render_tree(self, root: ASTNode, lines: List[str]):
        # (node, depth, closing): a closing entry emits the ")" of an operator
        stack: List[Tuple[Optional[ASTNode], int, bool]] = [(root, 1, False)]

        while stack:
            node, depth, closing = stack.pop()
            pad = INDENT * depth

            if closing:
                lines.append(f"{pad})")
            elif node is None:
                lines.append(f"{pad}(Missing)")
            elif isinstance(node, Identifier):
                lines.append(f"{pad}(Identifier {node.value})")
            elif isinstance(node, Number):
                lines.append(f"{pad}(Number {node.value})")
            elif isinstance(node, (BinaryOp, UnaryOp)):
                kind = "BinOp" if isinstance(node, BinaryOp) else "UnaryOp"
                lines.append(f"{pad}({kind} {node.operator}")
                stack.append((node, depth, True))
                for child in reversed(node.children()):
                    stack.append((child, depth + 1, False))
            else:
                lines.append(f"{pad}(Unknown)")


class JsonExporter(ASTVisitor):
    """
    Exports a tree as nested JSON objects.

    The visit_* methods describe one node with its child slots empty;
    to_dict fills the slots in without recursing.
    """

    def to_dict(self, root: Optional[ASTNode]) -> Optional[Dict[str, Any]]:
        if root is None:
            return None

        result = root.accept(self)
        stack = [(root, result)]
        while stack:
            node, data = stack.pop()
            for key, child in zip(_child_keys(node), node.children()):
                if child is None:
                    continue
                data[key] = child.accept(self)
                stack.append((child, data[key]))
        return result

    def export(self, root: Optional[ASTNode]) -> str:
        data = self.to_dict(root)
        with _recursion_headroom(_nesting_depth(root)):
            return json.dumps({"ast": data}, indent=2)

    def visit_identifier(self, node: Identifier) -> Dict[str, Any]:
        return {"type": "Identifier", "value": node.value}

    def visit_number(self, node: Number) -> Dict[str, Any]:
        return {"type": "Number", "value": node.value}

    def visit_binary_op(self, node: BinaryOp) -> Dict[str, Any]:
        return {"type": "BinaryOp", "operator": node.operator, "left": None, "right": None}

    def visit_unary_op(self, node: UnaryOp) -> Dict[str, Any]:
        return {"type": "UnaryOp", "operator": node.operator, "operand": None}


def _child_keys(node: ASTNode) -> Tuple[str, ...]:
    if isinstance(node, BinaryOp):
        return ("left", "right")
    if isinstance(node, UnaryOp):
        return ("operand",)
    return ()


def _nesting_depth(root: Optional[ASTNode]) -> int:
    deepest = 0
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in node.children() if child is not None)
    return deepest


@contextmanager
def _recursion_headroom(levels: int):
    """Temporarily raise the recursion limit for a json dump `levels` deep."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + JSON_FRAMES_PER_LEVEL * levels)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class DotGraphRenderer:
    """Renders a tree as a Graphviz digraph, one DOT node per AST node."""

    def render(self, root: Optional[ASTNode]) -> str:
        lines = ["digraph AST {", "  node [shape=box];"]
        count = 0
        # (node, parent DOT name); DOT names follow pre-order, the root is n1
        stack: List[Tuple[Optional[ASTNode], Optional[str]]] = [(root, None)] if root is not None else []

        while stack:
            node, parent = stack.pop()
            count += 1
            name = f"n{count}"

            if node is None:
                lines.append(f'  {name} [label="Missing", style=dashed];')
            else:
                lines.append(f'  {name} [label="{_dot_label(node)}"];')
                for child in reversed(node.children()):
                    stack.append((child, name))

            if parent is not None:
                lines.append(f"  {parent} -> {name};")

        lines.append("}")
        return "\n".join(lines) + "\n"


def _dot_label(node: ASTNode) -> str:
    if isinstance(node, (BinaryOp, UnaryOp)):
        kind = "BinOp" if isinstance(node, BinaryOp) else "UnaryOp"
        text = f"{kind} {node.operator}"
    else:
        text = f"{node.node_type.value} {node.value}"
    return text.replace("\\", "\\\\").replace('"', '\\"')


@dataclass
class RenderedOutput:
    """Everything stage 3 produced for one tree."""
    primary_format: str
    text: str
    json: Optional[str] = None
    dot: Optional[str] = None


PRIMARY_FORMATS = {
    "LISP_STYLE_AST": lambda root: OutputRenderer().render(root),
    "JSON": lambda root: JsonExporter().export(root),
    "DOT_GRAPH": lambda root: DotGraphRenderer().render(root),
}


class OutputStage:
    """
    Selects renderers according to stage-3 OutputSettings.

    Raises:
        ConfigurationError: If the primary format is not supported
    """

    def __init__(self, settings: Optional[OutputSettings] = None):
        self.settings = settings or OutputSettings()
        if self.settings.primary_format not in PRIMARY_FORMATS:
            raise create_unsupported_format_error(self.settings.primary_format, PRIMARY_FORMATS)

    def generate(self, root: Optional[ASTNode]) -> RenderedOutput:
        fmt = self.settings.primary_format
        logger.info("Output format: %s", fmt)

        output = RenderedOutput(primary_format=fmt, text=PRIMARY_FORMATS[fmt](root))
        if self.settings.json_export:
            output.json = JsonExporter().export(root)
        if self.settings.debug_format == "DOT_GRAPH":
            output.dot = DotGraphRenderer().render(root)
        if self.settings.secondary_format:
            logger.debug("Secondary format %s is recorded only", self.settings.secondary_format)
        return output


def render_ast(root: Optional[ASTNode]) -> str:
    """Render a tree in the canonical LISP-style format."""
    return OutputRenderer().render(root)
