"""Small operating-systems exercises: banker's algorithm, dining philosophers and warm-ups."""

__version__ = "0.1.0"