import logging
from dataclasses import dataclass, field

import pandas as pd

from . import settings

logger = logging.getLogger(__name__)


class CSVFormatError(ValueError):
    """Raised when uploaded text cannot be read as a CSV table."""


@dataclass
class Dataset:
    headers: list
    rows: list = field(default_factory=list)
    name: str = None

    def __len__(self):
        return len(self.rows)

    def column(self, name):
        if name not in self.headers:
            raise KeyError(name)
        return [row[name] for row in self.rows]

    def to_frame(self):
        """Raw string cells as a DataFrame, columns in header order."""
        return pd.DataFrame(self.rows, columns=self.headers)


def parse_csv_line(line):
    """Split one CSV line on commas that sit outside double quotes.

    Quotes are dropped from the output, a doubled quote inside a quoted
    field becomes a literal quote, and each field is whitespace-trimmed.
    """
    fields = []
    current = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and line[i + 1:i + 2] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current).strip())
    return fields


def _unique_headers(headers):
    seen = {}
    unique = []
    for header in headers:
        if header not in seen:
            seen[header] = 0
            unique.append(header)
            continue
        seen[header] += 1
        candidate = f"{header}.{seen[header]}"
        while candidate in seen:
            seen[header] += 1
            candidate = f"{header}.{seen[header]}"
        seen[candidate] = 0
        unique.append(candidate)
    return unique


def parse_csv(text, name=None):
    lines = [line for line in text.strip().split("\n") if line.strip()]
    if not lines:
        raise CSVFormatError("The file is empty, expected a header line.")

    headers = _unique_headers(parse_csv_line(lines[0]))
    rows = []
    for line in lines[1:]:
        values = parse_csv_line(line)
        rows.append({
            header: values[index] if index < len(values) else ""
            for index, header in enumerate(headers)
        })

    logger.info("Parsed %s: %d columns, %d rows", name or "CSV text", len(headers), len(rows))
    return Dataset(headers=headers, rows=rows, name=name)


def decode_csv_bytes(data):
    # latin-1 maps every byte, so the loop always ends in a decode
    for encoding in settings.CSV_ENCODINGS:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            continue
        logger.debug("Decoded upload with encoding: %s", encoding)
        return text
    raise CSVFormatError("Could not decode the file with any supported encoding.")
