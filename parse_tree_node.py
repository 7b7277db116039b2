# parse_tree_node.py
import weakref
from enum import Enum

EOF = -1


class Token:
    """
    A matched input symbol as handed to the tree by the lexer.
    Only `text` matters to tree printing; the rest is carried along for debugging.
    """
    def __init__(self, type: int, text: str = None, line: int = None, column: int = None):
        self.type = type
        self.text = text
        self.line = line
        self.column = column

    def __repr__(self):
        return f"Token(type={self.type}, text={self.text!r}, line={self.line}, column={self.column})"

    def __str__(self):
        return str(self.text)


class NodeKind(Enum):
    RULE = "rule"
    TERMINAL = "terminal"
    ERROR = "error"
    OTHER = "other"


class ParseTreeNode:
    """
    Base node of a parse tree.

    Children are owned through `children`; `parent` is only a back reference
    (held weakly) and is filled in by `add_child`.
    """
    kind = NodeKind.OTHER

    def __init__(self, payload=None):
        self._payload = payload
        self._parent = None
        self.children = []        # Ordered left to right as parsed

    @property
    def payload(self):
        return self._payload

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child_node):
        """Adds a child node to this node and returns it."""
        if not isinstance(child_node, ParseTreeNode):
            raise TypeError("Child must be an instance of ParseTreeNode")
        child_node._parent = weakref.ref(self)
        self.children.append(child_node)
        return child_node

    def get_child(self, i: int):
        return self.children[i]

    def get_child_count(self) -> int:
        return len(self.children)

    def __repr__(self):
        return f"{type(self).__name__}(payload={self.payload!r}, children={len(self.children)})"

    def __str__(self):
        if self.payload is None:
            return "null"
        return str(self.payload)


class RuleNode(ParseTreeNode):
    """One application of a grammar rule, identified by its index in the parser's rule names."""
    kind = NodeKind.RULE

    def __init__(self, rule_index: int):
        super().__init__()
        self.rule_index = rule_index

    @property
    def payload(self):
        return self

    def __repr__(self):
        return f"RuleNode(rule_index={self.rule_index}, children={len(self.children)})"

    def __str__(self):
        # Rule indices from this node up to the outermost enclosing rule
        indices = []
        node = self
        while isinstance(node, RuleNode):
            indices.append(str(node.rule_index))
            node = node.parent
        return "[" + " ".join(indices) + "]"


class TerminalNode(ParseTreeNode):
    kind = NodeKind.TERMINAL

    def __init__(self, symbol):
        super().__init__(symbol)

    @property
    def symbol(self):
        return self.payload

    def __repr__(self):
        return f"{type(self).__name__}(symbol={self.symbol!r})"

    def __str__(self):
        if isinstance(self.symbol, Token):
            if self.symbol.type == EOF:
                return "<EOF>"
            return str(self.symbol.text)
        return super().__str__()


class ErrorNode(TerminalNode):
    """Token consumed or conjured up while the parser was recovering from a syntax error."""
    kind = NodeKind.ERROR
