# src/pycodon_frames/reporting.py
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Gabriel Falque
# Distributed under the terms of the MIT License.
# (See accompanying file LICENSE or copy at https://opensource.org/license/mit/)

"""
Rendering of reading-frame codon counts as text or TSV.
"""
import logging
from typing import List

from .analysis import CodonCountsType, tally_to_dataframe
from .utils import REPORT_SEPARATOR, CodonFrame

logger = logging.getLogger(__name__)


def format_frame_header(frame: CodonFrame) -> str:
    """Header line naming the reading frame and occurrence range."""
    return (f"Codons in reading frame {frame.reading_frame} "
            f"({frame.min_count}-{frame.max_count} occurrences):")


def format_codon_report(frame: CodonFrame, entries: CodonCountsType) -> str:
    """
    Builds the plain-text report: header, separator, then one 'CODON: count'
    line per entry, in the order given.

    Args:
        frame (CodonFrame): The query the entries were computed for.
        entries (CodonCountsType): (codon, count) pairs to list.

    Returns:
        str: The report, without a trailing newline.
    """
    lines: List[str] = [format_frame_header(frame), REPORT_SEPARATOR]
    lines.extend(f"{codon.upper()}: {count}" for codon, count in entries)
    logger.debug(f"Formatted text report with {len(entries)} codon lines.")
    return "\n".join(lines)


def format_codon_table(entries: CodonCountsType) -> str:
    """Tab-separated 'Codon\\tCount' table of the entries, header included."""
    df = tally_to_dataframe(entries)
    return df.to_csv(sep='\t', index=False)
