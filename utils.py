# utils.py

_WHITESPACE_ESCAPES = {
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
}


def escape_whitespace(s: str, escape_spaces: bool = False) -> str:
    """
    Replaces tab, newline and carriage return with their two-character escapes.
    With escape_spaces, a plain space is shown as a middle dot.
    """
    buf = []
    for c in s:
        if c == " " and escape_spaces:
            buf.append("·")
        else:
            buf.append(_WHITESPACE_ESCAPES.get(c, c))
    return "".join(buf)
