"""
Store codec for the notes collection

Converts between the in-memory Notes collection and the YAML document
kept in the store file:

    ---
    notes:
      - text: first note
      - text: frodo
        name: hobbits

An empty or whitespace-only document decodes to an empty collection.
The codec is pure; it knows nothing about paths.
"""

from typing import Any, Union

import yaml

from .exceptions import DecodeError
from .models import Note, Notes


def decode(raw: Union[str, bytes]) -> Notes:
    """Decode raw store content into a Notes collection"""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Notes store is not valid UTF-8: {e}") from e

    # A freshly touched or newline-only file is not corrupt
    if not raw.strip():
        return Notes()

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise DecodeError(f"Notes store is not valid YAML: {e}") from e

    if data is None:
        return Notes()
    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a mapping at the top level, got {type(data).__name__}"
        )
    if "notes" not in data:
        raise DecodeError("Missing 'notes' key")

    entries = data["notes"]
    if entries is None:
        return Notes()
    if not isinstance(entries, list):
        raise DecodeError(
            f"'notes' must be a list, got {type(entries).__name__}"
        )

    return Notes([_decode_note(index, entry) for index, entry in enumerate(entries)])


def _decode_note(index: int, entry: Any) -> Note:
    if not isinstance(entry, dict):
        raise DecodeError(f"Note {index} must be a mapping")

    text = entry.get("text")
    if not isinstance(text, str):
        raise DecodeError(f"Note {index} must have a string 'text'")

    name = entry.get("name")
    if name is not None and not isinstance(name, str):
        raise DecodeError(f"Note {index} has a non-string 'name'")

    return Note(text=text, name=name or None)


class _IndentedDumper(yaml.SafeDumper):
    """SafeDumper that indents list items under their parent key"""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


def encode(notes: Notes) -> str:
    """Encode a Notes collection as a YAML document"""
    return yaml.dump(
        notes.to_dict(),
        Dumper=_IndentedDumper,
        default_flow_style=False,
        sort_keys=False,
        explicit_start=True,
        allow_unicode=True,
    )
