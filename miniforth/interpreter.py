"""
miniforth Interpreter - Dispatch loop and Python DSL interface
"""

import logging

from .core import (Builtin, ForthBase, NestingTooDeep, UnknownWord, UserWord,
                   parse_number, tokenize)
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .compiler import ForthCompiler


logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 128


class Forth(ForthBase, ForthArithmetic, ForthStack, ForthCompiler):
    """Complete interpreter combining all mixins

    Usage:
        forth = Forth()
        forth.execute(": square dup * ;")
        forth.execute("5 square .")      # prints 25
    """

    def __init__(self, output=None, echo_errors=True, max_depth=DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth
        super().__init__(output=output, echo_errors=echo_errors)
        self._register_all_words()

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_arithmetic_words()
        self._register_stack_words()
        self._register_compiler_words()

    def execute(self, text):
        """Execute a line of source.

        Conditions met along the way are reported, collected in
        ``self.errors`` and never raised. A definition left open at the
        end of the text stays open for the next call.
        """
        self.errors = []
        for token in tokenize(text):
            if self.defining:
                self._capture(token)
            else:
                self._interpret(token)
        if self.defining:
            logger.debug("definition %r still open", self.state.name)
        return self

    def _interpret(self, token):
        try:
            self._resolve(token, 0)
        except NestingTooDeep as e:
            self._report(e)
        except RecursionError:
            # max_depth above what the interpreter stack allows
            self._report(NestingTooDeep(token, self.max_depth))

    def _resolve(self, token, depth, in_definition=False):
        """Word, then integer literal, then unknown"""
        word = self.words.get(token)
        if word is not None:
            self._run(word, depth)
            return
        try:
            number = parse_number(token)
        except ValueError:
            self._report(UnknownWord(token, in_definition))
            return
        self.stack.push(number)

    def _run(self, word, depth):
        if isinstance(word, Builtin):
            word.op()
        elif isinstance(word, UserWord):
            self._replay(word, depth + 1)
        else:
            raise TypeError(f"not a word: {word!r}")

    def _replay(self, word, depth):
        if depth > self.max_depth:
            raise NestingTooDeep(word.name, self.max_depth)
        for token in word.tokens:
            self._resolve(token, depth, in_definition=True)

    @property
    def ok(self):
        """True if the last execute reported nothing"""
        return not self.errors

    # DSL

    def __repr__(self):
        return f"<Forth {self.state!r} {self.stack!r}>"

    def __call__(self, *values):
        return self.push(*values)

    def push(self, *values):
        for v in values:
            self.stack.push(v)
        return self

    def pop(self):
        return self.stack.pop()

    def peek(self):
        return self.stack.peek()

    def depth(self):
        return self.stack.depth()

    def clear(self):
        self.stack.clear()
        return self

    def run(self, code):
        return self.execute(code)

    def reset(self):
        """Empty the stack and drop any open definition; words are kept"""
        self.stack.clear()
        self.errors = []
        return self.abort()
