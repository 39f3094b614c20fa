# src/pycodon_frames/utils.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Utility functions and constants for the pycodon_frames package.
"""
import logging
from typing import List, Set, Union

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

# --- Configure logging for this module ---
logger = logging.getLogger(__name__)


# --- Constants ---
CODON_LENGTH: int = 3
VALID_READING_FRAMES: Set[int] = {0, 1, 2}

# Default occurrence range: report every codon seen at least once
DEFAULT_MIN_COUNT: int = 1
DEFAULT_MAX_COUNT: int = 2**31 - 1

REPORT_SEPARATOR: str = "-" * 52

# Anything the counter accepts as a sequence
SequenceLike = Union[str, Seq, SeqRecord]


class CodonFrame:
    """
    Configuration for one reading-frame query: the DNA sequence, the frame
    offset and the inclusive occurrence range to report.

    Values are stored as given. Use check_codon_frame() to look for
    suspicious settings; nothing here rejects them.
    """

    def __init__(self,
                 dna: SequenceLike,
                 reading_frame: int = 0,
                 min_count: int = DEFAULT_MIN_COUNT,
                 max_count: int = DEFAULT_MAX_COUNT):
        self.dna = dna
        self.reading_frame = reading_frame
        self.min_count = min_count
        self.max_count = max_count

    def __repr__(self) -> str:
        return (f"CodonFrame(len={len(sequence_to_str(self.dna))}, reading_frame={self.reading_frame}, "
                f"min_count={self.min_count}, max_count={self.max_count})")


# --- Functions ---

def sequence_to_str(sequence: SequenceLike) -> str:
    """
    Returns the plain string behind a sequence-like object.

    Args:
        sequence (SequenceLike): A str, a Bio.Seq.Seq or a Bio.SeqRecord.SeqRecord.

    Returns:
        str: The sequence characters, case preserved.

    Raises:
        TypeError: If the object is not one of the supported types.
    """
    if isinstance(sequence, str):
        return sequence
    if isinstance(sequence, SeqRecord):
        return str(sequence.seq)
    if isinstance(sequence, Seq):
        return str(sequence)
    logger.error(f"Unsupported sequence type: {type(sequence).__name__}")
    raise TypeError(f"Expected str, Seq or SeqRecord, got {type(sequence).__name__}.")


def check_codon_frame(frame: CodonFrame) -> List[str]:
    """
    Looks for settings the counter tolerates but that are probably mistakes.

    Each issue found is logged as a warning. The frame is not modified and
    the query can still run: an unusual offset only shifts the scan, and an
    inverted range produces an empty report.

    Args:
        frame (CodonFrame): The query configuration to check.

    Returns:
        List[str]: Human-readable descriptions of the issues (empty if none).
    """
    issues: List[str] = []
    if frame.reading_frame not in VALID_READING_FRAMES:
        issues.append(f"Reading frame {frame.reading_frame} is outside {sorted(VALID_READING_FRAMES)}.")
    if frame.min_count < 0 or frame.max_count < 0:
        issues.append(f"Occurrence bounds should be non-negative (got {frame.min_count}-{frame.max_count}).")
    if frame.min_count > frame.max_count:
        issues.append(f"Minimum occurrences ({frame.min_count}) exceeds maximum ({frame.max_count}); "
                      "the report will be empty.")

    for issue in issues:
        logger.warning(issue)
    return issues
