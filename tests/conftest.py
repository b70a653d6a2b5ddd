import os
import random
import tempfile

# Keep test logs out of the working tree; must happen before wordduel is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordduel-logs-'))

import pytest

from wordduel.services.dictionary import WordDictionary
from wordduel.services.session_registry import SessionRegistry
from wordduel.services.strategist import ComputerStrategist
from wordduel.websocket.protocol import SessionProtocolHandler

WORDS = [
    "crane", "tower", "alloy", "llama", "level", "belle", "lemon", "scoop",
    "cools", "raise", "stare", "trace", "stone", "about", "eerie", "geese",
    "sheep", "speed", "spree", "tease",
]


class ScriptedRng:
    """Feeds fixed characters to code generation."""

    def __init__(self, letters):
        self.letters = iter(letters)

    def choice(self, seq):
        return next(self.letters)


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def dictionary():
    return WordDictionary(WORDS)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def strategist(dictionary, rng):
    return ComputerStrategist(dictionary, rng)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(dictionary, clock):
    return SessionRegistry(dictionary, rng=ScriptedRng("ABC123" + "XYZ789" + "QQQ111"), clock=clock)


@pytest.fixture
def protocol(registry):
    return SessionProtocolHandler(registry)
