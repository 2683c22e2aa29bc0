import os
import sys

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from falling_blocks.game import GameConfig, GameSession
from helpers import sequence


@pytest.fixture
def make_session():
    """Build an unstarted session; positional args fix the piece order."""
    def _make(*kinds, **config):
        source = sequence(*kinds) if kinds else None
        return GameSession(GameConfig(**config), index_source=source)
    return _make
