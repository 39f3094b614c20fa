# src/pycodon_frames/analysis.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Core reading-frame codon counting: tally codons in one frame and keep
those whose occurrence count falls inside a given range.
"""
import logging
from collections import Counter
from typing import List, Mapping, Tuple

import pandas as pd

from .utils import CODON_LENGTH, CodonFrame, SequenceLike, sequence_to_str

# --- Configure logging for this module ---
logger = logging.getLogger(__name__)

# Type alias for reported (codon, count) pairs
CodonCountsType = List[Tuple[str, int]]


def build_codon_tally(sequence: SequenceLike, offset: int = 0) -> Counter[str]:
    """
    Counts the codons found at positions offset, offset+3, offset+6, ...

    Only complete codons are counted; trailing bases that do not fill a
    codon are ignored. A new Counter is returned on every call.

    Args:
        sequence (SequenceLike): DNA sequence (str, Seq or SeqRecord). Not validated.
        offset (int): Reading frame offset, normally 0, 1 or 2. Other values
                      only shift the scan; positions before index 0 are skipped.

    Returns:
        Counter[str]: Codon -> number of occurrences in that frame.
    """
    seq_str: str = sequence_to_str(sequence)
    # First position of the frame that lies inside the sequence
    start: int = offset if offset >= 0 else offset % CODON_LENGTH
    stop: int = len(seq_str) - CODON_LENGTH + 1

    tally: Counter[str] = Counter()
    for i in range(start, stop, CODON_LENGTH):
        tally[seq_str[i:i + CODON_LENGTH]] += 1
    return tally


def filter_codon_counts(
    tally: Mapping[str, int],
    min_count: int,
    max_count: int,
    sort: bool = False
) -> CodonCountsType:
    """
    Selects the codons whose count lies in the inclusive range [min_count, max_count].

    Codons are uppercased for output. The tally is not modified. An inverted
    range (min_count > max_count) simply selects nothing.

    Args:
        tally (Mapping[str, int]): Codon counts, e.g. from build_codon_tally().
        min_count (int): Lowest count to report.
        max_count (int): Highest count to report.
        sort (bool): If True, order the result by codon. Otherwise the order
                     follows the tally's iteration order.

    Returns:
        CodonCountsType: List of (CODON, count) pairs.
    """
    entries: CodonCountsType = [
        (codon.upper(), count)
        for codon, count in tally.items()
        if min_count <= count <= max_count
    ]
    if sort:
        entries.sort(key=lambda entry: entry[0])
    return entries


def tally_to_dataframe(entries: CodonCountsType) -> pd.DataFrame:
    """Converts reported (codon, count) pairs into a DataFrame with 'Codon' and 'Count' columns."""
    return pd.DataFrame(entries, columns=['Codon', 'Count'])


def count_codons_in_frame(frame: CodonFrame, sort: bool = False) -> CodonCountsType:
    """
    Runs the full query for one CodonFrame: build the tally, then filter it.

    Args:
        frame (CodonFrame): Sequence, reading frame and occurrence range.
        sort (bool): Order the result by codon.

    Returns:
        CodonCountsType: The codons within the range, with their counts.
    """
    tally = build_codon_tally(frame.dna, frame.reading_frame)
    logger.debug(f"Scanned {sum(tally.values())} codons ({len(tally)} distinct) in reading frame {frame.reading_frame}.")

    entries = filter_codon_counts(tally, frame.min_count, frame.max_count, sort=sort)
    logger.debug(f"{len(entries)} codons within {frame.min_count}-{frame.max_count} occurrences.")
    return entries
