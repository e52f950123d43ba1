from pathlib import Path

import pytest

from pickles_core.mapper import Mapper

from tests.helpers import FEATURE_EATING


@pytest.fixture
def mapper() -> Mapper:
    return Mapper()


@pytest.fixture
def feature_file(tmp_path: Path) -> Path:
    path = tmp_path / 'features' / 'eating.feature'
    path.parent.mkdir(parents=True)
    path.write_text(FEATURE_EATING, encoding='utf-8')

    return path
