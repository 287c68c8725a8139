"""beesolver: Spelling Bee word finder and scorer."""

__version__ = "0.1.0"
