"""ParkAssist: a parking-distance sensor simulator.

Readings come either from the keyboard or from a seeded random generator,
are classified into a safety status, drawn as a text gauge, and appended to
a CSV log store.
"""

__version__ = "0.1.0"
