"""Conversion of infix expressions to postfix notation."""

_PRIORITIES = {
    "#": 0,
    "(": 1,
    "+": 2,
    "-": 2,
    "*": 3,
    "/": 3,
    "^": 4,
}

_SENTINEL = "#"


def priority(op):
    """Return the stack priority of an operator symbol."""
    try:
        return _PRIORITIES[op]
    except KeyError:
        raise ValueError(f"unknown operator: {op!r}") from None


def infix_to_postfix(expression):
    """Convert an infix expression of single-character operands to postfix.

    An operator only pops operators of strictly higher priority, so operators
    of equal priority group to the right.
    """
    stack = [_SENTINEL]
    output = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch.isascii() and ch.isalnum():
            output.append(ch)
        elif ch == ")":
            while stack[-1] != "(":
                if stack[-1] == _SENTINEL:
                    raise ValueError("unmatched ')'")
                output.append(stack.pop())
            stack.pop()
        else:
            if ch == _SENTINEL:
                raise ValueError(f"unknown operator: {ch!r}")
            level = priority(ch)
            while priority(stack[-1]) > level:
                output.append(stack.pop())
            stack.append(ch)
    while stack[-1] != _SENTINEL:
        op = stack.pop()
        if op == "(":
            raise ValueError("unmatched '('")
        output.append(op)
    return "".join(output)