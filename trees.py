# trees.py
import logging

from parse_tree_node import NodeKind, Token
from utils import escape_whitespace

logger = logging.getLogger(__name__)


class RuleIndexError(IndexError):
    """A rule node's index has no entry in the supplied rule names (tree built against another grammar)."""
    def __init__(self, rule_index, rule_count):
        super().__init__(f"rule index {rule_index} out of range for {rule_count} rule names")
        self.rule_index = rule_index
        self.rule_count = rule_count


def get_rule_names(source):
    """
    Turns a name table source into a plain list of rule names.

    Args:
        source: None, a sequence of rule names, or a recognizer exposing
                `get_rule_names()` or a `rule_names` attribute.

    Returns:
        list or None: The rule names, or None when there is nothing to look them up in.
    """
    if source is None:
        return None
    if callable(getattr(source, "get_rule_names", None)):
        names = source.get_rule_names()
    elif hasattr(source, "rule_names"):
        names = source.rule_names
    else:
        names = source
    if names is None or isinstance(names, list):
        return names
    return list(names)


def _node_text(t, rule_names):
    if rule_names is not None:
        if t.kind is NodeKind.RULE:
            rule_index = t.rule_index
            if not 0 <= rule_index < len(rule_names):
                raise RuleIndexError(rule_index, len(rule_names))
            return rule_names[rule_index]
        elif t.kind is NodeKind.ERROR:
            return str(t)
        elif t.kind is NodeKind.TERMINAL and isinstance(t.symbol, Token):
            return t.symbol.text

    # no rule names to go on
    payload = t.payload
    if isinstance(payload, Token):
        return payload.text
    if payload is None:
        return "null"
    return str(payload)


def get_node_text(t, rule_names=None) -> str:
    """
    Display label for a single node.

    Rule nodes are named from `rule_names`, error nodes use their own text and
    terminals their token text. Without rule names every node falls back to
    its payload ("null" when there is none).
    """
    return _node_text(t, get_rule_names(rule_names))


def to_string_tree(t, rule_names=None) -> str:
    """
    Print out a whole tree in LISP form, e.g. "(prog (stat x = 1 ;) <EOF>)".

    Leaves print as their label alone; any node with children prints as
    "(label child1 child2 ...)". Whitespace in labels is escaped, parentheses
    are not. The walk uses its own stack, so very deep trees do not hit the
    interpreter's recursion limit.
    """
    rule_names = get_rule_names(rule_names)
    logger.debug(f"Rendering tree rooted at {t!r} (rule names: {'yes' if rule_names is not None else 'no'})")

    buf = []
    stack = [t]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            buf.append(item)
            continue
        s = escape_whitespace(_node_text(item, rule_names), False)
        child_count = item.get_child_count()
        if child_count == 0:
            buf.append(s)
            continue
        buf.append("(" + s)
        stack.append(")")
        for i in reversed(range(child_count)):
            stack.append(item.get_child(i))
            stack.append(" ")
    return "".join(buf)


def get_ancestors(t) -> list:
    """
    Return a list of all ancestors of this node. The first node of the
    list is the root and the last is the parent of this node.
    """
    if t.parent is None:
        return []
    ancestors = []
    t = t.parent
    while t is not None:
        ancestors.append(t)
        t = t.parent
    ancestors.reverse()
    return ancestors


# --- Example Usage ---
if __name__ == "__main__":
    import sys
    from parse_tree_node import RuleNode, TerminalNode, ErrorNode, EOF

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logging.getLogger().addHandler(handler)
    logging.getLogger().setLevel(logging.DEBUG)

    rule_names = ["prog", "stat", "expr"]
    prog = RuleNode(0)
    stat = prog.add_child(RuleNode(1))
    stat.add_child(TerminalNode(Token(1, "x", 1, 0)))
    stat.add_child(TerminalNode(Token(2, "=", 1, 2)))
    expr = stat.add_child(RuleNode(2))
    expr.add_child(TerminalNode(Token(3, "1", 1, 4)))
    stat.add_child(ErrorNode(Token(4, "\n", 1, 5)))
    prog.add_child(TerminalNode(Token(EOF, "<EOF>", 2, 0)))

    print(to_string_tree(prog, rule_names))
    print(to_string_tree(prog))
    print([get_node_text(a, rule_names) for a in get_ancestors(expr.get_child(0))])
