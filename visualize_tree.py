# visualize_tree.py
import logging
import os

import graphviz
from graphviz import Digraph

import config
from parse_tree_node import NodeKind
from trees import get_node_text, get_rule_names
from utils import escape_whitespace

logger = logging.getLogger(__name__)

_NODE_STYLES = {
    NodeKind.RULE: {'shape': 'ellipse', 'fillcolor': 'lightgray'},
    NodeKind.TERMINAL: {'shape': 'box', 'fillcolor': 'lightblue'},
    NodeKind.ERROR: {'shape': 'box', 'fillcolor': 'lightcoral'},
    NodeKind.OTHER: {'shape': 'box', 'fillcolor': 'white'},
}


def get_tree_graph(tree, rule_names=None, font_name=None, font_size=None):
    """
    Builds a graphviz representation of the parse tree.

    Args:
        tree (ParseTreeNode): The root of the (sub)tree to draw.
        rule_names: Rule names or a recognizer, as accepted by trees.get_rule_names.
        font_name (str): Font for node labels. Defaults to config.TREE_FONT_NAME.
        font_size (int): Font size for node labels. Defaults to config.TREE_FONT_SIZE.

    Returns:
        graphviz.Digraph: The graph, nodes named node0, node1, ... in pre-order.
    """
    rule_names = get_rule_names(rule_names)
    font_name = font_name or config.TREE_FONT_NAME
    font_size = font_size or config.TREE_FONT_SIZE

    dot = Digraph(comment='Parse Tree', graph_attr={'rankdir': 'TB', 'splines': 'true'}) # TB: Top to Bottom
    dot.attr('node', fontname=font_name, fontsize=str(font_size), style='filled')

    node_count = 0
    stack = [(tree, None)]
    while stack:
        node, parent_name = stack.pop()
        graphviz_node_name = f'node{node_count}'
        node_count += 1

        label = escape_whitespace(get_node_text(node, rule_names), False)
        dot.node(graphviz_node_name, graphviz.escape(label), **_NODE_STYLES[node.kind])
        if parent_name is not None:
            dot.edge(parent_name, graphviz_node_name)

        for child in reversed(node.children):
            stack.append((child, graphviz_node_name))

    logger.debug(f"Built parse tree graph with {node_count} nodes")
    return dot


def get_tree_source(tree, rule_names=None, font_name=None, font_size=None) -> str:
    """Returns the DOT document describing the tree."""
    return get_tree_graph(tree, rule_names, font_name, font_size).source


def write_tree_source(tree, rule_names, filename, font_name=None, font_size=None):
    dot = get_tree_graph(tree, rule_names, font_name, font_size)
    path = dot.save(filename)
    logger.info(f"Parse tree DOT source written to {path}")
    return path


def render_tree_image(tree, rule_names=None, filename=None, fmt=None):
    """
    Renders the tree to an image with the Graphviz `dot` executable.

    Args:
        filename (str): Output path without extension. Defaults to 'parse_tree'
                        inside config.PARSE_TREE_IMAGE_DIR.
        fmt (str): Image format. Defaults to config.PARSE_TREE_IMAGE_FORMAT.

    Returns:
        str or None: Path of the rendered image, or None when Graphviz is not installed.
    """
    if filename is None:
        os.makedirs(config.PARSE_TREE_IMAGE_DIR, exist_ok=True)
        filename = os.path.join(config.PARSE_TREE_IMAGE_DIR, 'parse_tree')
    fmt = fmt or config.PARSE_TREE_IMAGE_FORMAT

    dot = get_tree_graph(tree, rule_names)
    try:
        path = dot.render(filename, view=False, format=fmt, cleanup=True) # cleanup=True removes the intermediate .dot file
    except graphviz.ExecutableNotFound:
        logger.error("Graphviz 'dot' executable not found in PATH.", exc_info=True)
        return None
    logger.info(f"Parse tree image rendered to {path}")
    return path
