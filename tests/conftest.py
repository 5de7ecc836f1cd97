import os
import pytest
import random
import sys

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
from pathlib import Path

# Add src to sys.path so we can import markdraft
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from markdraft.core.models import Library, Mark, Power


SAMPLE_CSV = """NAME,POWER,CATEGORY,TAG,TAG,DESCRIPTION
Ember,Great,Fire,hot,bright,A glowing coal
Ash,Poor,Fire,grey,,What remains
Tide,Good,Water,wet,,Comes and goes
Curse,Bad Karma,,dark,,Nothing good comes of it
Mist,Moderate,Water,wet,grey,Hard to see through
Crown,Unique,Royal,bright,,One of a kind
"""


# Common test fixtures
@pytest.fixture
def sample_library() -> Library:
    """Library with a spread of powers, categories and tags."""
    library = Library()
    library.add_mark(Mark("Ember", Power.GREAT, "Fire", {"hot", "bright"}, "A glowing coal"))
    library.add_mark(Mark("Ash", Power.POOR, "Fire", {"grey"}, "What remains"))
    library.add_mark(Mark("Tide", Power.GOOD, "Water", {"wet"}, "Comes and goes"))
    library.add_mark(Mark("Curse", Power.BAD_KARMA, "", {"dark"}, "Nothing good comes of it"))
    library.add_mark(Mark("Mist", Power.MODERATE, "Water", {"wet", "grey"}, "Hard to see through"))
    library.add_mark(Mark("Crown", Power.UNIQUE, "Royal", {"bright"}, "One of a kind"))
    return library


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random stream."""
    return random.Random(1234)


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """The sample library written as a CSV file."""
    path = tmp_path / "library.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
