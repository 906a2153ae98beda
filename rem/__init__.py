"""
rem - a personal note-taking command-line tool

Notes are appended to a single YAML file, listed, numbered, deleted by
line number and optionally edited in an external editor.

Main Components:
- NoteEngine: load-mutate-store operations over the notes file
- codec: YAML encoding of the notes collection
- ConfigManager: resolves the notes path, editor and logging settings

Usage:
    from rem import NoteEngine

    engine = NoteEngine("/home/me/rem_notes.txt")
    engine.write_note(["buy", "milk"])
    engine.cat(numbered=True)
"""

__version__ = "0.1.0"

from .config import ConfigManager, RemConfig
from .engine import NoteEngine, NoteListing
from .exceptions import DecodeError, EditorError, RemError
from .models import Note, Notes

__all__ = [
    # Engine
    "NoteEngine",
    "NoteListing",

    # Models
    "Note",
    "Notes",

    # Configuration
    "ConfigManager",
    "RemConfig",

    # Errors
    "RemError",
    "DecodeError",
    "EditorError",
]
