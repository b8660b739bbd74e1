"""
miniforth Compiler - Word definitions with ':' and ';'

Between ':' and ';' the interpreter is Capturing: the first token names the
new word and the rest are recorded verbatim. Nothing captured is resolved
until the word runs, so later redefinitions are seen by earlier words.
"""

import logging

from .core import Builtin, MissingWordName, UserWord, tokenize


logger = logging.getLogger(__name__)

DEFINITION_END = ';'


class Normal:
    """Tokens are executed as they arrive"""

    def __repr__(self):
        return 'Normal'


NORMAL = Normal()


class Capturing:
    """Tokens are recorded into a pending definition"""

    def __init__(self):
        self.name = None
        self.tokens = []

    def __repr__(self):
        return f"Capturing(name={self.name!r}, tokens={self.tokens!r})"


class ForthCompiler:
    """Mixin providing word compilation and definition"""

    def _register_compiler_words(self):
        """Register compiler words"""
        self.state = NORMAL
        self._add_builtin(':', self._colon)

    @property
    def defining(self):
        return isinstance(self.state, Capturing)

    @property
    def pending(self):
        """(name, tokens) of an unfinished definition, or None"""
        if not self.defining:
            return None
        return (self.state.name, list(self.state.tokens))

    def _colon(self):
        if self.defining:
            logger.debug("discarding pending definition %r", self.state.name)
        self.state = Capturing()

    def _capture(self, token):
        """Handle one token while Capturing"""
        if token == DEFINITION_END:
            self._finish_definition()
        elif self.state.name is None:
            self.state.name = token
        else:
            self.state.tokens.append(token)

    def _finish_definition(self):
        """Register the pending word and go back to Normal"""
        pending, self.state = self.state, NORMAL
        if pending.name is None:
            self._report(MissingWordName())
            return
        self._add_word(UserWord(pending.name, tuple(pending.tokens)))
        logger.debug("defined %r as %r", pending.name, pending.tokens)

    def abort(self):
        """Drop an unfinished definition"""
        self.state = NORMAL
        return self

    def define(self, name, body):
        """Define a word from Python; body is a string or a token list"""
        if not name or name != name.strip() or len(tokenize(name)) != 1:
            raise ValueError(f"invalid word name: {name!r}")
        if isinstance(body, str):
            tokens = tokenize(body)
        else:
            tokens = [self._body_token(t) for t in body]
        self._add_word(UserWord(name, tuple(tokens)))
        return self

    def _body_token(self, token):
        """Word name or integer literal as stored in a definition"""
        if isinstance(token, int) and not isinstance(token, bool):
            return str(token)
        if not isinstance(token, str) or len(tokenize(token)) != 1 or token != token.strip():
            raise ValueError(f"invalid token in definition: {token!r}")
        return token

    def word_names(self):
        """Names in the dictionary, in registration order"""
        return list(self.words)

    def see(self, name):
        """Source form of a word, or None if it is not defined"""
        word = self.words.get(name)
        if word is None:
            return None
        if isinstance(word, Builtin):
            return f": {name} <builtin> ;"
        return ' '.join([':', name, *word.tokens, DEFINITION_END])
