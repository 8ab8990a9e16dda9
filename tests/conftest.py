from pathlib import Path

import pytest

RES_DIR = Path(__file__).resolve().parents[1] / 'res'


class ScriptedRandom:
    """A random source that returns preset indices and records every draw."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def randrange(self, n):
        value = self.draws.pop(0)
        assert 0 <= value < n, f"scripted draw {value} out of range for {n}"
        self.calls.append(n)
        return value


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def alice_text():
    return (RES_DIR / 'alice_opening.txt').read_text(encoding='utf-8')
