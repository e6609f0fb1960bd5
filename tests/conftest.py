"""Shared fixtures: a small class CSV and stores built over it."""

import pytest

from cercaclasse.store import RecordStore, clear_cache

# Header order differs from the record field order on purpose, and carries an
# extra ANNO column; the last row is short (no CLASSE_DISPLAY, no ANNO).
SAMPLE_CSV = "\r\n".join([
    "CODICESCUOLA,DENOMINAZIONESCUOLA,CODICEISTITUTORIFERIMENTO,DENOMINAZIONEISTITUTORIFERIMENTO,"
    "DESCRIZIONECOMUNE,PROVINCIA,CLASSE_DISPLAY,ANNO",
    "PZIS022008,IIS EINSTEIN - DE LORENZO,PZIS022008,IIS EINSTEIN - DE LORENZO,POTENZA,PZ,1A - LICEO SCIENTIFICO,2024",
    "PZPS02201X,LICEO SCIENTIFICO EINSTEIN,PZIS022008,IIS EINSTEIN - DE LORENZO,POTENZA,PZ,2B - LICEO SCIENTIFICO,2024",
    "",
    "MTIC81200B,IC PADRE PIO,MTIC81200B,IC PADRE PIO,ALIANO,MT,3C,2024",
    "RMPC12000C,LICEO CLASSICO CARDUCCI,RMIS09800A,IIS CARDUCCI,ROMA,RM,3A,2024",
    "PZEE00900Q,SCUOLA PRIMARIA ROMANO,PZIC80000A,IC ROMANO,POTENZA,PZ,5A,2024",
    "PZMM85601L,SCUOLA MEDIA NICOLÒ CARUSO,PZIC856000,IC CARUSO,SANT'ARCANGELO,PZ,1D,2024",
    "MTPS010001,LICEO SCIENTIFICO DA VINCI,MTIS00100X,IIS DA VINCI,MATERA,MT",
    "",
])

HEADER = (
    "CODICESCUOLA,CODICEISTITUTORIFERIMENTO,DENOMINAZIONESCUOLA,DENOMINAZIONEISTITUTORIFERIMENTO,"
    "DESCRIZIONECOMUNE,PROVINCIA,CLASSE_DISPLAY"
)


@pytest.fixture(autouse=True)
def reset_default_store():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def store() -> RecordStore:
    return RecordStore.from_text(SAMPLE_CSV)


@pytest.fixture
def broken_store() -> RecordStore:
    """Store whose source lacks the CODICESCUOLA column."""
    return RecordStore.from_text(
        "CODICEISTITUTORIFERIMENTO,DENOMINAZIONESCUOLA,DENOMINAZIONEISTITUTORIFERIMENTO,"
        "DESCRIZIONECOMUNE,PROVINCIA,CLASSE_DISPLAY\n"
        "PZIS022008,IIS EINSTEIN,IIS EINSTEIN,POTENZA,PZ,1A\n"
    )


@pytest.fixture
def make_store():
    """Build a store from data rows under the canonical header."""
    def _make(rows: list[str]) -> RecordStore:
        return RecordStore.from_text("\n".join([HEADER, *rows]))
    return _make
