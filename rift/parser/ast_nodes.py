"""
Abstract Syntax Tree node definitions for RIFT expressions.

Four node kinds: Identifier, Number, BinaryOp and UnaryOp. UnaryOp is part
of the node set but no grammar rule produces it yet.

Each node owns its children exclusively, so a tree is acyclic with a single
root. A child of BinaryOp may be None when the parser found no operand.

Author: xwest
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    BINARY_OP = "BinaryOp"
    UNARY_OP = "UnaryOp"


class NodeIdAllocator:
    """
    Hands out node ids for one tree.

    Owned by whoever builds the tree; ids are unique within that owner only.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def allocate(self) -> int:
        node_id = self._next
        self._next += 1
        return node_id


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit_identifier(self, node: 'Identifier') -> Any:
        pass

    @abstractmethod
    def visit_number(self, node: 'Number') -> Any:
        pass

    @abstractmethod
    def visit_binary_op(self, node: 'BinaryOp') -> Any:
        pass

    def visit_unary_op(self, node: 'UnaryOp') -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} does not handle UnaryOp")


class ASTNode(ABC):
    """
    Base class for all AST nodes.

    Equality is structural: two nodes are equal when they have the same
    kind, value and equal children. node_id and token are ignored.
    """

    def __init__(self, node_type: ASTNodeType, node_id: Optional[int] = None,
                 token: Optional[Token] = None):
        self.node_type = node_type
        self.node_id = node_id
        self.token = token

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List[Optional['ASTNode']]:
        """Child slots in order; a missing operand shows up as None."""
        pass

    @abstractmethod
    def label(self) -> Tuple:
        """This node's own kind and value, without its children."""
        pass

    def shape(self) -> Tuple:
        """
        Nested tuple describing the subtree: label() followed by the shape
        of each child slot (None for a missing child).

        Built bottom-up with an explicit stack; left-deep chains such as
        `a + a + ... + a` are as tall as they are long.
        """
        shapes: Dict[int, Tuple] = {}
        stack: List[Tuple[ASTNode, bool]] = [(self, False)]

        while stack:
            node, expanded = stack.pop()
            if not expanded:
                stack.append((node, True))
                for child in node.children():
                    if child is not None:
                        stack.append((child, False))
                continue

            shapes[id(node)] = node.label() + tuple(
                shapes.pop(id(child)) if child is not None else None
                for child in node.children()
            )

        return shapes[id(self)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ASTNode):
            return NotImplemented

        pairs = [(self, other)]
        while pairs:
            left, right = pairs.pop()
            if left is None or right is None:
                if left is not right:
                    return False
                continue
            if left.label() != right.label():
                return False
            left_children, right_children = left.children(), right.children()
            if len(left_children) != len(right_children):
                return False
            pairs.extend(zip(left_children, right_children))

        return True

    def __hash__(self) -> int:
        return hash(self.shape())


class Identifier(ASTNode):
    """Identifier leaf."""

    def __init__(self, value: str, node_id: Optional[int] = None, token: Optional[Token] = None):
        super().__init__(ASTNodeType.IDENTIFIER, node_id, token)
        self.value = value

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_identifier(self)

    def children(self) -> List[Optional[ASTNode]]:
        return []

    def label(self) -> Tuple:
        return ("Identifier", self.value)

    def __repr__(self) -> str:
        return f"Identifier({self.value!r})"


class Number(ASTNode):
    """Numeric leaf. The lexeme is kept as text, exactly as written."""

    def __init__(self, value: str, node_id: Optional[int] = None, token: Optional[Token] = None):
        super().__init__(ASTNodeType.NUMBER, node_id, token)
        self.value = value

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number(self)

    def children(self) -> List[Optional[ASTNode]]:
        return []

    def label(self) -> Tuple:
        return ("Number", self.value)

    def __repr__(self) -> str:
        return f"Number({self.value!r})"


class BinaryOp(ASTNode):
    """Binary operation; left and right are owned by this node."""

    def __init__(self, operator: str, left: Optional[ASTNode], right: Optional[ASTNode],
                 node_id: Optional[int] = None, token: Optional[Token] = None):
        super().__init__(ASTNodeType.BINARY_OP, node_id, token)
        self.operator = operator
        self.left = left
        self.right = right

    @property
    def value(self) -> str:
        return self.operator

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def children(self) -> List[Optional[ASTNode]]:
        return [self.left, self.right]

    def label(self) -> Tuple:
        return ("BinaryOp", self.operator)

    def __repr__(self) -> str:
        return f"BinaryOp({self.operator!r}, {self.left!r}, {self.right!r})"


class UnaryOp(ASTNode):
    """Unary operation. Reserved: the current grammar never builds one."""

    def __init__(self, operator: str, operand: Optional[ASTNode],
                 node_id: Optional[int] = None, token: Optional[Token] = None):
        super().__init__(ASTNodeType.UNARY_OP, node_id, token)
        self.operator = operator
        self.operand = operand

    @property
    def value(self) -> str:
        return self.operator

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_unary_op(self)

    def children(self) -> List[Optional[ASTNode]]:
        return [self.operand]

    def label(self) -> Tuple:
        return ("UnaryOp", self.operator)

    def __repr__(self) -> str:
        return f"UnaryOp({self.operator!r}, {self.operand!r})"


def walk(node: Optional[ASTNode]):
    """Yield every node of a tree in pre-order, skipping missing children."""
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        for child in reversed(current.children()):
            if child is not None:
                stack.append(child)
