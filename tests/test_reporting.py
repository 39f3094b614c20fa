# tests/test_reporting.py
import os

# Adjust import path
try:
    from src.pycodon_frames import reporting, utils # type: ignore
except ImportError:
     import sys
     sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
     from pycodon_frames import reporting, utils


def test_format_frame_header():
    frame = utils.CodonFrame("ATGATGCCC", reading_frame=1, min_count=2, max_count=5)
    assert reporting.format_frame_header(frame) == "Codons in reading frame 1 (2-5 occurrences):"

def test_format_codon_report():
    frame = utils.CodonFrame("ATGATGCCC", reading_frame=0, min_count=1, max_count=2)
    report = reporting.format_codon_report(frame, [("ATG", 2), ("CCC", 1)])
    assert report.splitlines() == [
        "Codons in reading frame 0 (1-2 occurrences):",
        "-" * 52,
        "ATG: 2",
        "CCC: 1",
    ]

def test_format_codon_report_uppercases():
    frame = utils.CodonFrame("atg", reading_frame=0, min_count=1, max_count=1)
    report = reporting.format_codon_report(frame, [("atg", 1)])
    assert report.splitlines()[-1] == "ATG: 1"

def test_format_codon_report_empty_has_header_only():
    frame = utils.CodonFrame("ATG", reading_frame=0, min_count=3, max_count=1)
    report = reporting.format_codon_report(frame, [])
    assert report.splitlines() == ["Codons in reading frame 0 (3-1 occurrences):", "-" * 52]

def test_format_codon_table():
    table = reporting.format_codon_table([("ATG", 2), ("CCC", 1)])
    assert table.splitlines() == ["Codon\tCount", "ATG\t2", "CCC\t1"]

def test_format_codon_table_empty():
    assert reporting.format_codon_table([]).splitlines() == ["Codon\tCount"]
