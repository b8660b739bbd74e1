#!/usr/bin/env python3
"""
miniforth - a small Forth-like stack language

Usage:
1. Example session:      python main.py
2. Run a Forth file:     python main.py file.fth
Add -v / --verbose to log interpreter activity to stderr.
"""

import logging
import sys

from miniforth import Forth


def create_forth():
    """Create a new Forth interpreter instance"""
    return Forth()


def run_example(forth):
    print("Forth Interpreter Example:")
    forth.execute(": square dup * ;")
    forth.execute("5 square .")
    forth.execute("3 4 + square .")


def run_file(forth, path):
    """Execute a source file line by line; returns the number of errors"""
    failures = 0
    with open(path, 'r') as file:
        for line in file:
            forth.execute(line)
            failures += len(forth.errors)
    return failures


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    if '-v' in args or '--verbose' in args:
        args = [a for a in args if a not in ('-v', '--verbose')]
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')

    f = create_forth()
    if not args:
        run_example(f)
        return 0

    arg = args[0]
    if len(args) == 1 and (arg.endswith('.fth') or arg.endswith('.forth')):
        return 1 if run_file(f, arg) else 0

    print(f"Unrecognized argument: {' '.join(args)}")
    print(__doc__)
    return 2


if __name__ == "__main__":
    sys.exit(main())
