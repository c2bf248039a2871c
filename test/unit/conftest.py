import pytest

####

from dexcite.object_.structure import structure


@pytest.fixture(autouse=True)
def fresh_structure():
    structure.reset()
    structure.settings.use_progress_bar = False
    yield structure
    structure.reset()
