EOF = "$"
DOT = "•"
MATH_NA = "∅"


def is_nonterminal(symbol: str | None) -> bool:
    """All-uppercase symbols with at least one letter are non-terminals.

    Anything else, including `None` and the empty string, is a terminal.
    """
    if not symbol:
        return False
    return symbol.upper() == symbol and symbol.lower() != symbol


def is_terminal(symbol: str | None) -> bool:
    return not is_nonterminal(symbol)
