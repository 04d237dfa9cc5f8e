"""Shared fixtures: a recording character screen and a quiet GameState."""

import random

import pytest

from termsnake.model import GameState


class FakeScreen:
    """Records drawing calls instead of touching a terminal."""

    def __init__(self, keys=()):
        self.cells = {}
        self.texts = []
        self.calls = []
        self.frames = 0
        self.keys = list(keys)
        self.opened = False
        self.closed = 0

    def open(self):
        self.opened = True

    def close(self):
        self.closed += 1

    def clear(self):
        self.calls.append("clear")
        self.cells = {}
        self.texts = []

    def put(self, x, y, char, color=None):
        self.calls.append("put")
        self.cells[(x, y)] = (char, color)

    def write(self, x, y, text, color=None):
        self.calls.append("write")
        self.texts.append((x, y, text, color))
        for i, char in enumerate(text):
            self.cells[(x + i, y)] = (char, color)

    def flush(self):
        self.calls.append("flush")
        self.frames += 1

    def read_key(self):
        return self.keys.pop(0)


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def state():
    return GameState(rng=random.Random(1234))
