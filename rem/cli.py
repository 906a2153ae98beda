#!/usr/bin/env python3
"""
Command-line interface for rem

Each command maps onto one NoteEngine operation:
    rem add [-n NAME] <words...>
    rem cat [-n] [-w]
    rem del <line> [-f]
    rem edit <line>
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ConfigManager, RemConfig
from .engine import NoteEngine
from .logger import setup_logging

logger = logging.getLogger(__name__)


def line_number(value: str) -> int:
    """argparse type for a zero-based note index"""
    try:
        line = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid line number: {value!r}")
    if line < 0:
        raise argparse.ArgumentTypeError(f"line must be 0 or greater, got {line}")
    return line


class RemTool:
    """Note-taking command-line tool"""

    def __init__(self, config: Optional[RemConfig] = None):
        self.config = config
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            prog='rem',
            description='Keep short notes in a single file',
            formatter_class=argparse.RawDescriptionHelpFormatter
        )

        parser.add_argument(
            '-v', '--verbose',
            action='store_true',
            help='Enable verbose output'
        )
        parser.add_argument(
            '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )

        subparsers = parser.add_subparsers(
            dest='command',
            help='Available commands'
        )

        # Add command
        add_parser = subparsers.add_parser(
            'add',
            help='Add a note'
        )
        add_parser.add_argument(
            'note',
            nargs='*',
            help='Words of the note'
        )
        add_parser.add_argument(
            '-n', '--name',
            help='Label shown before the note text'
        )

        # Cat command
        cat_parser = subparsers.add_parser(
            'cat',
            help='Show all notes'
        )
        cat_parser.add_argument(
            '-n', '--numbered',
            action='store_true',
            help='Prefix each note with its line number'
        )
        cat_parser.add_argument(
            '-w', '--without-names',
            action='store_true',
            help='Hide note names'
        )

        # Del command
        del_parser = subparsers.add_parser(
            'del',
            help='Delete a note by line number'
        )
        del_parser.add_argument(
            'line',
            type=line_number,
            help='Line number as shown by cat --numbered'
        )
        del_parser.add_argument(
            '-f', '--force',
            action='store_true',
            help='Delete without asking for confirmation'
        )

        # Edit command
        edit_parser = subparsers.add_parser(
            'edit',
            help='Edit a note in $EDITOR'
        )
        edit_parser.add_argument(
            'line',
            type=line_number,
            help='Line number as shown by cat --numbered'
        )

        return parser

    def run(self, args: Optional[List[str]] = None) -> int:
        """Run the tool and return the process exit code"""
        parsed_args = self.parser.parse_args(args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        config = self.config or ConfigManager.load()
        level = logging.DEBUG if parsed_args.verbose else config.log_level
        setup_logging(config.log_dir, level)

        engine = NoteEngine(config.notes_path, editor=config.editor)

        command_map = {
            'add': self.cmd_add,
            'cat': self.cmd_cat,
            'del': self.cmd_del,
            'edit': self.cmd_edit
        }

        command_func = command_map[parsed_args.command]
        logger.debug(f"Running '{parsed_args.command}' on {engine.path}")
        try:
            command_func(engine, parsed_args)
        except Exception as e:
            logger.error(f"Could not run '{parsed_args.command}': {e}")
            if parsed_args.verbose:
                import traceback
                traceback.print_exc()
            return 1

        return 0

    def cmd_add(self, engine: NoteEngine, args) -> None:
        engine.write_note(args.note, name=args.name)

    def cmd_cat(self, engine: NoteEngine, args) -> None:
        engine.cat(numbered=args.numbered, without_names=args.without_names)

    def cmd_del(self, engine: NoteEngine, args) -> None:
        engine.delete_line(args.line, force=args.force)

    def cmd_edit(self, engine: NoteEngine, args) -> None:
        engine.edit_note(args.line)


def main():
    """Main entry point"""
    tool = RemTool()
    sys.exit(tool.run())


if __name__ == '__main__':
    main()
