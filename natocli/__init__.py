"""Manga catalogue models, chapter selection and chapter page downloads."""

__version__ = "0.1.0"