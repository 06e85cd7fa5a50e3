import codecs
import os
import re
from typing import Iterator, List, Optional

from csvso.canonical.column import Column
from csvso.canonical.schema import Schema
from csvso.utils.exceptions import MissingInputError, SchemaError

DEFAULT_CSV_ENCODING = "cp932"
HEADER_LINE_COUNT = 3
DELIMITER = ","

LINE_BREAK = re.compile(r"\r\n|\r|\n")

BYTE_ORDER_MARKS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
    (codecs.BOM_UTF8, "utf-8-sig"),
)


# ------------------------------------------------------------------
# Line helpers
# ------------------------------------------------------------------
def split_csv_line(line: str) -> List[str]:
    """
    Plain comma split with per-token trim. No quoted-field support.
    """
    return [token.strip() for token in line.split(DELIMITER)]


def split_lines(text: str) -> List[str]:
    """
    Split on CRLF, CR or LF only. A trailing line break does not
    produce an extra empty line.
    """
    if not text:
        return []
    lines = LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def is_skippable_row(line: str) -> bool:
    return not line.strip() or line.lstrip().startswith("#")


# ------------------------------------------------------------------
# CSV Schema Adapter
# ------------------------------------------------------------------
class CSVSchemaAdapter:
    """
    CSV ingestion adapter for schema-declaring CSV files.
    Responsibilities:
    - Read the file in its authoring encoding (a UTF-8/16/32 BOM wins when present)
    - Split the comment / header / type lines
    - Enforce equal column counts across the three lines
    - Iterate data rows, skipping blanks and comment lines
    DOES NOT:
    - Handle quoted fields or embedded delimiters
    - Validate identifiers or type names
    """
    def __init__(self, file_path: Optional[str], encoding: str = DEFAULT_CSV_ENCODING):
        self.file_path = file_path
        self.encoding = encoding or DEFAULT_CSV_ENCODING
        self._lines: Optional[List[str]] = None

    # --------------------------------------------------
    # REQUIRED BY OPERATIONS
    # --------------------------------------------------
    def parse(self) -> Schema:
        """
        Operation entrypoint.
        """
        return self._parse_schema()

    def iter_data_rows(self) -> Iterator[List[str]]:
        """
        Token lists for lines 4..N.
        """
        lines = self._read_lines()
        for line in lines[HEADER_LINE_COUNT:]:
            if is_skippable_row(line):
                continue
            yield split_csv_line(line)

    # --------------------------------------------------
    # Core parsing logic
    # --------------------------------------------------
    def _parse_schema(self) -> Schema:
        lines = self._read_lines()

        if len(lines) < HEADER_LINE_COUNT:
            raise SchemaError(
                "CSV must have at least 3 lines: comment, headers, and types. "
                f"Found {len(lines)} in {self.file_path}"
            )

        comments = split_csv_line(lines[0].lstrip("#").strip())
        headers = split_csv_line(lines[1])
        types = split_csv_line(lines[2])

        if not (len(comments) == len(headers) == len(types)):
            raise SchemaError(
                "Comment, header, and type counts must match "
                f"(comments={len(comments)}, headers={len(headers)}, types={len(types)})"
            )

        columns = [
            Column(comment=comment, name=name, type_name=type_name)
            for comment, name, type_name in zip(comments, headers, types)
        ]

        return Schema(
            columns=columns,
            metadata={
                "source_file": self.file_path,
                "encoding": self.encoding,
                "line_count": len(lines),
            },
        )

    # --------------------------------------------------
    # Internal helpers
    # --------------------------------------------------
    def _read_lines(self) -> List[str]:
        if self._lines is None:
            self._lines = split_lines(self._read_text())
        return self._lines

    def _read_text(self) -> str:
        if not self.file_path:
            raise MissingInputError("Please assign a CSV file.")
        if not os.path.isfile(self.file_path):
            raise MissingInputError(f"CSV file not found: {self.file_path}")

        try:
            with open(self.file_path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise MissingInputError(f"Cannot read CSV file {self.file_path}: {e}") from e

        # UTF-32 LE before UTF-16 LE: they share the leading FF FE
        for bom, codec in BYTE_ORDER_MARKS:
            if raw.startswith(bom):
                return raw.decode(codec, errors="replace")
        return raw.decode(self.encoding, errors="replace")
