"""
miniforth Stack Operations - Stack manipulation and output words
"""


class ForthStack:
    """Mixin providing stack manipulation operations"""

    def _register_stack_words(self):
        """Register stack words"""
        self._add_builtin('.', self._dot)
        self._add_builtin('dup', self._dup)
        self._add_builtin('swap', self._swap)

    def _dot(self):
        self._emit(self.stack.pop())

    def _dup(self):
        self.stack.push(self.stack.peek())

    def _swap(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(b)
        self.stack.push(a)
