# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: QuoteCSVSource
# -----------------------------------------------------------------------------

import csv
import logging
import time
from pathlib import Path
from typing import Iterator, List

from document.QuoteRecord import QuoteRecord
from utility.errors import SourceFormatError
from utility.logging_utils import get_class_logger


class QuoteCSVSource:
    """
    Reads quote records from a two-column CSV file with a header row.

      column 0: character / speaker label
      column 1: quote text

    The whole file is validated before any record is returned, so a bad
    row fails the run before any embedding work starts.
    """

    EXPECTED_COLUMNS = 2

    def __init__(self, path: str | Path, encoding: str = "utf-8", logger: logging.Logger | None = None):
        self.path = Path(path)
        self.encoding = encoding
        self.logger = logger or get_class_logger(self.__class__)

    def read_records(self) -> List[QuoteRecord]:
        start_time = time.time()
        self.logger.info("Reading quotes from '%s'...", self.path)

        if not self.path.is_file():
            raise SourceFormatError(f"Quotes file not found: {self.path}")

        try:
            with self.path.open("r", encoding=self.encoding, newline="") as fh:
                records = list(self._parse(csv.reader(fh)))
        except (UnicodeDecodeError, csv.Error) as e:
            raise SourceFormatError(f"Could not parse '{self.path}': {e}") from e

        elapsed = (time.time() - start_time) * 1000.0
        self.logger.info("Read %d quote(s) from '%s' (%.1f ms)", len(records), self.path, elapsed)
        return records

    def __iter__(self) -> Iterator[QuoteRecord]:
        return iter(self.read_records())

    def _parse(self, reader) -> Iterator[QuoteRecord]:
        header = next(reader, None)
        if header is None:
            raise SourceFormatError(f"'{self.path}' is empty: missing header row", row=1)
        if len(header) != self.EXPECTED_COLUMNS:
            raise SourceFormatError(
                f"Header row must have {self.EXPECTED_COLUMNS} columns, got {len(header)}: {header!r}",
                row=1,
            )
        self.logger.debug("CSV header: %s", header)

        for row in reader:
            line = reader.line_num
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) != self.EXPECTED_COLUMNS:
                raise SourceFormatError(
                    f"Row {line} must have {self.EXPECTED_COLUMNS} columns, got {len(row)}: {row!r}",
                    row=line,
                )
            if not row[1].strip():
                raise SourceFormatError(f"Row {line} has an empty quote", row=line)
            yield QuoteRecord(character=row[0].strip(), quote=row[1].strip(), row=line)
