"""Reading sources. :mod:`simulated` provides the automatic-mode generator."""
