"""Record normalization and note-reference resolution for the Meld desktop app."""

__version__ = "0.1.0"
