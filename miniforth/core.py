"""
miniforth Core - Base class with fundamental infrastructure
- Error taxonomy
- Stack
- Word variants and dictionary management
- Tokenizer
"""

import logging
import re
import sys
from collections import namedtuple


logger = logging.getLogger(__name__)

_INTEGER = re.compile(r'[+-]?[0-9]+\Z')


class ForthError(Exception):
    """Base class for conditions reported by the interpreter"""
    message = "Error"

    def __str__(self):
        return self.message


class StackUnderflow(ForthError):
    message = "Error: Stack underflow"


class DivisionByZero(ForthError):
    message = "Error: Division by zero"


class UnknownWord(ForthError):
    """Token that is neither a word nor an integer literal"""

    def __init__(self, token, in_definition=False):
        super().__init__(token)
        self.token = token
        self.in_definition = in_definition

    def __str__(self):
        if self.in_definition:
            return f"Unknown word in definition: {self.token}"
        return f"Unknown word: {self.token}"


class MissingWordName(ForthError):
    message = "Error: Missing word name"


class NestingTooDeep(ForthError):
    """Replay of user words went past the configured depth"""

    def __init__(self, name, depth):
        super().__init__(name, depth)
        self.name = name
        self.depth = depth

    def __str__(self):
        return f"Error: Nesting too deep in '{self.name}' (limit {self.depth})"


Builtin = namedtuple('Builtin', ['name', 'op'])
Builtin.__doc__ = "Native word; op is called with no arguments"

UserWord = namedtuple('UserWord', ['name', 'tokens'])
UserWord.__doc__ = "Word defined with ':'; tokens are resolved when it runs"


class Stack:
    """Integer data stack, last element is the top.

    Popping or peeking an empty stack hands a StackUnderflow to ``report``
    and yields 0 so the current word can finish. Without a reporter the
    error is raised instead.
    """

    def __init__(self, report=None):
        self._items = []
        self._report = report

    def push(self, value):
        self._items.append(value)

    def pop(self):
        if not self._items:
            self._underflow()
            return 0
        return self._items.pop()

    def peek(self):
        if not self._items:
            self._underflow()
            return 0
        return self._items[-1]

    def _underflow(self):
        error = StackUnderflow()
        if self._report is None:
            raise error
        self._report(error)

    def depth(self):
        return len(self._items)

    def clear(self):
        self._items.clear()

    def items(self):
        """Snapshot from bottom to top"""
        return list(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        if isinstance(other, Stack):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self):
        return f"<{len(self._items)}> {self._items}"


def tokenize(text):
    """Split on whitespace; no strings, comments or escapes"""
    return text.split()


def parse_number(token):
    """Parse a signed base-10 integer literal, ValueError otherwise"""
    if not _INTEGER.match(token):
        raise ValueError(f"not an integer literal: {token!r}")
    return int(token)


class ForthBase:
    """Base mixin providing core infrastructure"""

    def __init__(self, output=None, echo_errors=True):
        self.words = {}
        self.errors = []
        self.stack = Stack(report=self._report)

        self._output = output
        self.echo_errors = echo_errors

    @property
    def output(self):
        return self._output if self._output is not None else sys.stdout

    def _emit(self, text):
        print(text, file=self.output)

    def _report(self, error):
        """Record a non-fatal condition and render it at the boundary"""
        self.errors.append(error)
        logger.debug("reported %s: %s", type(error).__name__, error)
        if self.echo_errors:
            self._emit(str(error))

    def _add_builtin(self, name, op):
        self.words[name] = Builtin(name, op)

    def _add_word(self, word):
        """Insert or replace a dictionary entry"""
        previous = self.words.get(word.name)
        if previous is not None:
            logger.debug("redefining %r (was %s)", word.name, type(previous).__name__)
        self.words[word.name] = word

    def lookup(self, name):
        """Return the current entry for name, or None"""
        return self.words.get(name)
