from . import settings

STRINGS = {
    "en": {
        "value_axis": "Value",
        "frequency_axis": "Frequency",
        "count": "Count",
        "median": "Median",
        "average": "Average",
        "choose_column": "Choose a numeric column...",
        "filtered": "Filtered: {filtered} of {total} entries",
        "all_shown": "All {total} entries shown",
    },
    "de": {
        "value_axis": "Wert",
        "frequency_axis": "Häufigkeit",
        "count": "Anzahl",
        "median": "Median",
        "average": "Durchschnitt",
        "choose_column": "Wählen Sie eine numerische Spalte...",
        "filtered": "Gefiltert: {filtered} von {total} Einträgen",
        "all_shown": "Alle {total} Einträge angezeigt",
    },
}


def text(key, locale=None, **values):
    strings = STRINGS.get(locale or settings.LOCALE, STRINGS["en"])
    return strings[key].format(**values)
