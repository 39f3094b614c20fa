# tests/conftest.py
import pytest
from typing import Dict

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

# --- Reset Logging Configuration Fixture ---
@pytest.fixture(autouse=True)
def reset_logging_config(monkeypatch):
    """Reset logging configuration before each test to ensure proper log capture.

    The CLI attaches its own handler to the application logger; this fixture
    clears such handlers so that pytest's caplog sees every record.
    """
    import logging

    # Completely reset the logging system
    logging.shutdown()
    logging.root.handlers.clear()

    # Monkeypatch the basicConfig to do nothing
    monkeypatch.setattr(logging, 'basicConfig', lambda **kwargs: None)

    # Ensure all loggers propagate to the root logger
    for name in logging.root.manager.loggerDict:
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.propagate = True
        logger.disabled = False
        logger.setLevel(logging.NOTSET)

    # Reset the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.NOTSET)
    root_logger.handlers = []

    # Add a NullHandler to avoid "No handlers could be found" warnings
    root_logger.addHandler(logging.NullHandler())

    yield

# --- Fixtures for Sequence Data ---

@pytest.fixture
def repeated_codon_seq() -> str:
    """ATG twice then CCC in frame 0."""
    return "ATGATGCCC"

@pytest.fixture
def mixed_frames_seq() -> str:
    """A 20-base sequence: frame 0 has 6 full codons, frames 1 and 2 have 6 each as well."""
    return "AAACCCAAAGGGAAATTTCC"

@pytest.fixture
def mixed_frames_expected() -> Dict[int, Dict[str, int]]:
    """Expected tallies of mixed_frames_seq for each reading frame."""
    return {
        0: {"AAA": 3, "CCC": 1, "GGG": 1, "TTT": 1},
        1: {"AAC": 1, "CCA": 1, "AAG": 1, "GGA": 1, "AAT": 1, "TTC": 1},
        2: {"ACC": 1, "CAA": 1, "AGG": 1, "GAA": 1, "ATT": 1, "TCC": 1},
    }

@pytest.fixture
def sample_seq_record() -> SeqRecord:
    """A Biopython record wrapping a short sequence."""
    return SeqRecord(Seq("ATGATGCCCTT"), id="Rec1", description="test record")
