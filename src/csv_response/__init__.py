"""
csv_response – encode in-memory records as a CSV download.

Import path convention::

    from csv_response.encoding import CsvEncoder
    from csv_response.kernel.errors import InvalidArgumentError, InvalidInputError
    from csv_response.adapters.fastapi import FastAPICsvResponse
"""

from csv_response.encoding import COMMA, SEMICOLON, TAB, CsvEncoder
from csv_response.http import CsvDownload

__version__ = "0.1.0"
__all__ = ["COMMA", "SEMICOLON", "TAB", "CsvDownload", "CsvEncoder", "__version__"]
