"""TutorRec: contact management with weekly appointment scheduling."""

__version__ = "0.1.0"
