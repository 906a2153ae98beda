"""
Note engine

Binds a store location and implements the index-based operations over
the notes collection. Every operation loads the whole collection fresh,
mutates it in memory and, when it changed, writes it back in full.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from . import codec
from .editor import edit_text
from .models import Note, Notes

logger = logging.getLogger(__name__)

NO_NOTES_MESSAGE = "No notes found! Try adding a note!"
EMPTY_NOTE_MESSAGE = "Your note is empty, try adding some content."
NOT_IN_NOTES_MESSAGE = "Line specified not in notes!"
DELETION_STOPPED_MESSAGE = "Deletion stopped."
EDITOR_NOT_SET_MESSAGE = "EDITOR is not set!"
CONFIRM_PROMPT = "Are you sure you want to continue? (y/n) "

_YES = ("y", "yes")
_NO = ("n", "no")


class NoteListing:
    """Lazy view of rendered note lines; each iteration starts over"""

    def __init__(self, notes: Notes, numbered: bool = False,
                 without_names: bool = False):
        self.notes = notes
        self.numbered = numbered
        self.without_names = without_names

    def __iter__(self) -> Iterator[str]:
        for index, note in enumerate(self.notes):
            line = note.render(with_name=not self.without_names)
            if self.numbered:
                yield f"{index}: {line}"
            else:
                yield line.strip()

    def __len__(self) -> int:
        return len(self.notes)


class NoteEngine:
    """Load-mutate-store operations over a single notes file"""

    def __init__(self, path: Union[str, Path], editor: Optional[str] = None):
        self.path = Path(path)
        self.editor = editor

    def read_note_file(self) -> Notes:
        """Load the collection; a missing store is an empty collection"""
        if not self.path.exists():
            logger.debug(f"Notes store {self.path} does not exist yet")
            return Notes()

        contents = self.path.read_text(encoding="utf-8")
        return codec.decode(contents)

    def write_all_notes(self, notes: Notes) -> None:
        """Rewrite the whole store with the given collection"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(codec.encode(notes))
        logger.info(f"Wrote {len(notes)} note(s) to {self.path}")

    def write_note(self, words: Sequence[str], name: Optional[str] = None) -> bool:
        """Append a note built from words; returns whether it was stored"""
        text = " ".join(words)
        if not text.strip():
            print(EMPTY_NOTE_MESSAGE)
            return False

        note = Note(text=text, name=(name or "").strip() or None)

        notes = self.read_note_file()
        notes.append(note)
        self.write_all_notes(notes)

        logger.info(f"Added note at line {len(notes) - 1}")
        return True

    def list_notes(self, numbered: bool = False,
                   without_names: bool = False) -> NoteListing:
        """Return the rendered lines of the current collection"""
        return NoteListing(self.read_note_file(), numbered, without_names)

    def cat(self, numbered: bool = False, without_names: bool = False) -> None:
        """Print every note, one per line"""
        listing = self.list_notes(numbered, without_names)
        if not len(listing):
            print(NO_NOTES_MESSAGE)
            return

        for line in listing:
            print(line)

    def delete_line(self, line: int, force: bool = False) -> bool:
        """Delete the note at line, asking first unless forced"""
        notes = self.read_note_file()

        if not self._check_line(notes, line):
            return False

        if not force and not self.confirm():
            print(DELETION_STOPPED_MESSAGE)
            return False

        notes.remove(line)
        self.write_all_notes(notes)

        print(f"Removed: {line}")
        logger.info(f"Removed note at line {line}")
        return True

    def edit_note(self, line: int) -> Optional[str]:
        """Edit the note at line in the configured editor"""
        if not self.editor:
            print(EDITOR_NOT_SET_MESSAGE)
            return None

        notes = self.read_note_file()

        if not self._check_line(notes, line):
            return None

        current = notes[line]
        revised = edit_text(self.editor, current.text).strip()
        notes.replace(line, Note(text=revised, name=current.name))
        self.write_all_notes(notes)

        print(f"Note committed! {revised}")
        logger.info(f"Edited note at line {line}")
        return revised

    def confirm(self) -> bool:
        """Ask for a yes/no answer until one is given"""
        while True:
            answer = input(CONFIRM_PROMPT).strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False

    @staticmethod
    def _check_line(notes: Notes, line: int) -> bool:
        """Report empty collections and out-of-range lines"""
        if notes.is_empty():
            print(NO_NOTES_MESSAGE)
            return False
        if not notes.contains_index(line):
            print(NOT_IN_NOTES_MESSAGE)
            return False
        return True
