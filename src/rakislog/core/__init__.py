"""Core types: levels, errors, records, loggers and the logger registry."""
