from datetime import date
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")


TODAY = date(2024, 6, 1)

SAMPLE_GEDCOM = """0 HEAD
1 CHAR UTF-8
1 GEDC
2 VERS 5.5.1
0 @I1@ INDI
1 NAME Ana /Lopez/
1 SEX F
0 @I22@ INDI
1 NAME /Garcia/
1 SEX M
0 @F1@ FAM
1 HUSB @I22@
1 WIFE @I1@
0 TRLR
"""


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def gedcom_file(tmp_path) -> Path:
    path = tmp_path / "people.ged"
    path.write_text(SAMPLE_GEDCOM, encoding="utf-8")
    return path
