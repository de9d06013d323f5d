"""Data input/output helpers for the reading log.

- :mod:`reading_log` appends readings to the CSV store.
- :mod:`log_loader` parses the store for offline review.
"""
