"""
Data model for rem notes
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class Note:
    """A single stored note, optionally labeled with a name"""
    text: str
    name: Optional[str] = None

    NAME_SEPARATOR: ClassVar[str] = " ~ "

    def render(self, with_name: bool = True) -> str:
        """Render the note as a single display line"""
        if with_name and self.name:
            return f"{self.name}{self.NAME_SEPARATOR}{self.text}"
        return self.text

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        data: Dict[str, Any] = {"text": self.text}
        if self.name:
            data["name"] = self.name
        return data


@dataclass
class Notes:
    """Ordered collection of notes; a note's position is its only address"""
    notes: List[Note] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    def is_empty(self) -> bool:
        return not self.notes

    def contains_index(self, index: int) -> bool:
        """Check whether index addresses an existing note"""
        return 0 <= index < len(self.notes)

    def append(self, note: Note) -> None:
        self.notes.append(note)

    def remove(self, index: int) -> Note:
        """Remove the note at index, shifting later notes down by one"""
        return self.notes.pop(index)

    def replace(self, index: int, note: Note) -> None:
        self.notes[index] = note

    def to_dict(self) -> Dict[str, Any]:
        return {"notes": [note.to_dict() for note in self.notes]}
