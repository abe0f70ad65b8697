"""
Tabular source readers.

Turns spreadsheets into taxonomy rows, and persisted JSON trees back into
nodes.
"""
import json
import logging
from pathlib import Path
from typing import Iterator, List, Sequence, Union

import pandas as pd

from core.constants import (
    CSV_EXTENSIONS,
    EXCEL_EXTENSIONS,
    HIERARCHY_LEVELS,
    METADATA_FIELDS,
    NUMERIC_METADATA_FIELDS,
)
from core.models import Node, NodeMetadata, Row
from utils.cell_utils import cell_to_number, cell_to_text

logger = logging.getLogger(__name__)


class TabularSourceError(ValueError):
    """Raised when source data exists but cannot be read."""


class TabularRowReader:
    """
    Reads taxonomy rows from an Excel or CSV file.

    Level cells are trimmed and blank cells become absent. Text metadata
    is kept verbatim; Materiality is read as a number.
    """

    def __init__(
        self,
        path: Union[str, Path],
        levels: Sequence[str] = HIERARCHY_LEVELS,
        sheet_name: Union[str, int] = 0
    ):
        self.path = Path(path)
        self.levels = tuple(levels)
        self.sheet_name = sheet_name

    def load_frame(self) -> pd.DataFrame:
        """
        Load the first (or named) sheet as a DataFrame of raw objects.

        Raises:
            FileNotFoundError: If the file does not exist
            TabularSourceError: If the format is unsupported or unreadable
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Input file '{self.path}' does not exist.")

        suffix = self.path.suffix.lower()
        try:
            if suffix in EXCEL_EXTENSIONS:
                frame = pd.read_excel(self.path, sheet_name=self.sheet_name, dtype=object)
            elif suffix in CSV_EXTENSIONS:
                frame = pd.read_csv(self.path, dtype=object, keep_default_na=False)
            else:
                raise TabularSourceError(f"Unsupported file type: {suffix or self.path.name}")
        except TabularSourceError:
            raise
        except Exception as e:
            raise TabularSourceError(f"Could not read {self.path}: {e}") from e

        frame.columns = [str(column).strip() for column in frame.columns]
        return frame

    def _row_from_record(self, record: dict, line: int) -> Row:
        values = {level: cell_to_text(record.get(level), strip=True) for level in self.levels}

        metadata = {}
        for column in METADATA_FIELDS:
            raw = record.get(column)
            if column in NUMERIC_METADATA_FIELDS:
                try:
                    metadata[column] = cell_to_number(raw)
                except ValueError:
                    logger.warning(f"Row {line}: non-numeric {column} {raw!r}, using 0")
                    metadata[column] = None
            else:
                metadata[column] = cell_to_text(raw)

        return Row(values=values, metadata=NodeMetadata.from_record(metadata))

    def iter_rows(self, frame: pd.DataFrame = None) -> Iterator[Row]:
        """Yield rows in sheet order."""
        if frame is None:
            frame = self.load_frame()
        # Data starts on spreadsheet line 2, under the header
        for line, record in enumerate(frame.to_dict(orient='records'), 2):
            yield self._row_from_record(record, line)

    def read(self) -> List[Row]:
        """Read all rows."""
        logger.info(f"Reading spreadsheet: {self.path}")
        frame = self.load_frame()

        missing = [level for level in self.levels if level not in frame.columns]
        if missing:
            logger.warning(f"Levels missing from {self.path.name}: {', '.join(missing)}")

        rows = list(self.iter_rows(frame))
        logger.info(f"Processing {len(rows)} records...")
        return rows


class JsonNodeReader:
    """Loads nodes back from a JSON file written by JsonNodeSink."""

    def __init__(self, path: Union[str, Path], levels: Sequence[str] = HIERARCHY_LEVELS):
        self.path = Path(path)
        self.levels = tuple(levels)

    def read(self) -> List[Node]:
        """
        Read nodes in file order.

        Raises:
            FileNotFoundError: If the file does not exist
            TabularSourceError: If the file is not a list of node records
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Tree file '{self.path}' does not exist.")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except json.JSONDecodeError as e:
            raise TabularSourceError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(records, list):
            raise TabularSourceError(f"Expected a list of nodes in {self.path}")

        try:
            return [Node.from_dict(record, self.levels) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise TabularSourceError(f"Malformed node record in {self.path}: {e}") from e
