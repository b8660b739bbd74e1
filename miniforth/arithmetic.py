"""
miniforth Arithmetic - Integer operations
"""

from .core import DivisionByZero


def truncated_div(a, b):
    """Integer quotient rounded toward zero"""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class ForthArithmetic:
    """Mixin providing arithmetic operations"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self._add_builtin('+', self._plus)
        self._add_builtin('-', self._minus)
        self._add_builtin('*', self._mult)
        self._add_builtin('/', self._div)

    def _plus(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(a + b)

    def _minus(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(a - b)

    def _mult(self):
        b = self.stack.pop()
        a = self.stack.pop()
        self.stack.push(a * b)

    def _div(self):
        b = self.stack.pop()
        a = self.stack.pop()
        if b == 0:
            # operands stay consumed
            self._report(DivisionByZero())
            return
        self.stack.push(truncated_div(a, b))
