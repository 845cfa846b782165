"""Encoding – record-to-CSV pipeline."""
from csv_response.encoding.encoder import COMMA, SEMICOLON, TAB, CsvEncoder
from csv_response.encoding.formatters import first_upper_no_underscores
from csv_response.encoding.transliteration import transliterate
from csv_response.encoding.writer import CsvRecordWriter

__all__ = [
    "COMMA",
    "CsvEncoder",
    "CsvRecordWriter",
    "SEMICOLON",
    "TAB",
    "first_upper_no_underscores",
    "transliterate",
]
