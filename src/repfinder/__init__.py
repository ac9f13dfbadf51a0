"""repfinder: Congress.gov 州別現職議員検索."""

__version__ = "0.1.0"
