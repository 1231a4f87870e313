"""ScholarNotes - layered study notes from PDF documents."""

__version__ = "0.1.0"
