import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# "en" or "de"
LOCALE = os.getenv("CSVSTATS_LOCALE", "en")

# Share of non-empty cells that must be numbers for a column to count as numeric
NUMERIC_THRESHOLD = float(os.getenv("CSVSTATS_NUMERIC_THRESHOLD", "0.8"))

# Cells treated as missing when classifying columns
EMPTY_MARKERS = ("", "-")

# Header names checked in order when looking for a date column
DATE_COLUMN_NAMES = [
    "date",
    "Date",
    "Datum",
    "datum",
    "Datum & Zeit",
    "datum & zeit",
]

# "integer" keeps a fixed 1..10 style scale, "distinct" plots only the values seen
AXIS_MODE = os.getenv("CSVSTATS_AXIS_MODE", "integer")
AXIS_MODES = ("integer", "distinct")
MAX_AXIS_LABELS = int(os.getenv("CSVSTATS_MAX_AXIS_LABELS", "500"))

CSV_ENCODINGS = ["utf-8-sig", "utf-8", "cp1252", "latin-1"]
URL_TIMEOUT = 60

FONT_FAMILY = "Rubik"
BAR_FILL = "rgba(0, 140, 230, 0.6)"
BAR_BORDER = "#008ce6"
TEXT_COLOR = "#064075"
MEDIAN_COLOR = "#064075"
AVERAGE_COLOR = "#064075"
EXPORT_DPI = 200
