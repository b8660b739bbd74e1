import io

import pytest

from miniforth import Forth


class Session:
    """Forth instance writing into a buffer"""

    def __init__(self, **kwargs):
        self.buffer = io.StringIO()
        self.forth = Forth(output=self.buffer, **kwargs)

    def __call__(self, text):
        self.forth.execute(text)
        return self

    @property
    def stack(self):
        return self.forth.stack.items()

    @property
    def errors(self):
        return self.forth.errors

    def lines(self):
        """Output lines written so far; the buffer is emptied"""
        text = self.buffer.getvalue()
        self.buffer.seek(0)
        self.buffer.truncate()
        return text.splitlines()


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def make_session():
    return Session
