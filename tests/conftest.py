import pytest

from parse_tree_node import EOF, ErrorNode, RuleNode, TerminalNode, Token

RULE_NAMES = ["prog", "stat", "expr"]


@pytest.fixture
def rule_names():
    return list(RULE_NAMES)


@pytest.fixture
def assignment_tree():
    """
    x = 1 <junk> followed by EOF:

    prog
    ├── stat
    │   ├── x
    │   ├── =
    │   ├── expr
    │   │   └── 1
    │   └── <error "\\n">
    └── <EOF>
    """
    prog = RuleNode(0)
    stat = prog.add_child(RuleNode(1))
    stat.add_child(TerminalNode(Token(1, "x", 1, 0)))
    stat.add_child(TerminalNode(Token(2, "=", 1, 2)))
    expr = stat.add_child(RuleNode(2))
    expr.add_child(TerminalNode(Token(3, "1", 1, 4)))
    stat.add_child(ErrorNode(Token(4, "\n", 1, 5)))
    prog.add_child(TerminalNode(Token(EOF, "<EOF>", 2, 0)))
    return prog
