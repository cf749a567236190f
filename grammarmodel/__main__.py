import argparse
import logging
import sys
from pprint import pprint

from .automaton import print_states, visualize
from .reader import GrammarError, read_grammar_file


def main(argv=None):
    cli = argparse.ArgumentParser(
        prog="grammarmodel",
        description="FIRST/FOLLOW sets and LR(0) item-sets of a context-free grammar",
    )
    cli.add_argument("file", help="grammar file, one alternative per line")
    cli.add_argument("-v", "--verbose", action="store_true", help="log every closure and new state")
    cli.add_argument("--strict", action="store_true", help="reject malformed grammars")
    cli.add_argument("--draw", metavar="PATH", help="save a drawing of the automaton to PATH")
    args = cli.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        grammar = read_grammar_file(args.file, strict=args.strict)
    except (OSError, GrammarError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(grammar)
    print()
    print("FIRST")
    pprint(grammar.first)
    print()
    print("FOLLOW")
    pprint(grammar.follow)
    print()
    print_states(grammar.states)
    print()
    print(grammar.trace)

    if args.draw:
        visualize(grammar, args.draw)
    return 0


if __name__ == "__main__":
    sys.exit(main())
