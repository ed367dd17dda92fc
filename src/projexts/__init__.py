"""projexts: named shortcuts for the commands you run every day."""

__version__ = "0.2.0"
