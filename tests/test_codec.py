"""
Tests for the YAML store codec.
"""

import pytest

from rem import codec
from rem.exceptions import DecodeError
from rem.models import Note, Notes


class TestDecode:
    """Test decoding raw store content"""

    @pytest.mark.parametrize("raw", ["", "\n", "   \n\t\n", b"", b"\n"])
    def test_blank_content_is_empty(self, raw):
        """Empty and whitespace-only files hold no notes"""
        assert codec.decode(raw) == Notes()

    @pytest.mark.parametrize("raw", ["notes: []\n", "notes:\n", "---\n"])
    def test_empty_documents(self, raw):
        """Explicitly empty documents hold no notes"""
        assert codec.decode(raw).is_empty()

    def test_decode_notes(self):
        """Notes are read in document order"""
        raw = (
            "notes:\n"
            "  - text: \"first note\"\n"
            "  - text: second note\n"
        )
        notes = codec.decode(raw)

        assert len(notes) == 2
        assert notes[0] == Note("first note")
        assert notes[1] == Note("second note")

    def test_decode_named_note(self):
        """A name label is optional per note"""
        notes = codec.decode("notes:\n- text: frodo\n  name: hobbits\n- text: sam\n")

        assert notes[0] == Note("frodo", name="hobbits")
        assert notes[1].name is None

    def test_decode_indented_list_without_trailing_newline(self):
        """Stores written with indented items and no final newline load"""
        notes = codec.decode("---\nnotes:\n  - text: first\n  - text: second")
        assert [n.text for n in notes] == ["first", "second"]

    def test_decode_bytes(self):
        """Raw bytes are decoded as UTF-8"""
        notes = codec.decode("notes:\n- text: café\n".encode("utf-8"))
        assert notes[0].text == "café"

    def test_unknown_keys_ignored(self):
        """Extra keys on a note do not break loading"""
        notes = codec.decode("notes:\n- text: hi\n  color: blue\n")
        assert notes[0] == Note("hi")

    @pytest.mark.parametrize("raw", [
        "notes: [unclosed\n",
        "just some words\n",
        "- text: a list at the top\n",
        "other: []\n",
        "notes: not-a-list\n",
        "notes:\n- plain string\n",
        "notes:\n- name: missing text\n",
        "notes:\n- text: 42\n",
        "notes:\n- text: hi\n  name: [a, b]\n",
    ])
    def test_malformed_content(self, raw):
        """Malformed content raises DecodeError"""
        with pytest.raises(DecodeError):
            codec.decode(raw)

    def test_invalid_utf8(self):
        """Undecodable bytes raise DecodeError"""
        with pytest.raises(DecodeError):
            codec.decode(b"notes:\n- text: \xff\xfe\n")


class TestEncode:
    """Test encoding the collection"""

    def test_encode_single_note(self):
        """A note is written under the notes key"""
        encoded = codec.encode(Notes([Note("new note who dis")]))
        assert encoded == "---\nnotes:\n  - text: new note who dis\n"

    def test_encode_empty(self):
        """The empty collection is an empty list"""
        assert codec.encode(Notes()) == "---\nnotes: []\n"

    def test_encode_name_after_text(self):
        """Key order is stable: text, then name"""
        encoded = codec.encode(Notes([Note("frodo", name="hobbits")]))
        assert encoded == "---\nnotes:\n  - text: frodo\n    name: hobbits\n"

    def test_encode_is_deterministic(self):
        """Encoding the same collection twice gives the same document"""
        notes = Notes([Note("b"), Note("a", name="x")])
        assert codec.encode(notes) == codec.encode(notes)

    def test_round_trip(self):
        """Decoding an encoded collection gives it back"""
        cases = [
            Notes(),
            Notes([Note("only")]),
            Notes([
                Note("first"),
                Note("first"),
                Note("  padded  "),
                Note("yes"),
                Note("123"),
                Note("line one\nline two"),
                Note("key: value # not a comment"),
                Note("frodo", name="hobbits"),
            ]),
        ]
        for notes in cases:
            assert codec.decode(codec.encode(notes)) == notes
