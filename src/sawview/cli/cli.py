# src/sawview/cli/cli.py
import argparse
import logging
import sys
from typing import List, Optional

from ..exceptions import ViewerError
from ..explorer.reader import LedgerReader
from ..explorer.report import ReportRenderer, styler_for
from ..utils.config import ViewerConfig
from ..utils.logger import setup_logging

logger = logging.getLogger(__name__)

class CLI:
    def __init__(self, stdout=None):
        self.stdout = stdout or sys.stdout
        self.config = None

    def main(self, args: List[str]) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help(self.stdout)
            return 2

        try:
            self.config = ViewerConfig(args.config)
            self._configure_logging(args.verbose)
            self._apply_overrides(args)
            args.func(args)
        except ViewerError as e:
            logger.error("%s", e)
            return 1
        return 0

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='sawview',
            description='View blocks and state of a Sawtooth ledger'
        )
        parser.add_argument('--config', default=None, help='Settings file (default ~/.sawview.yaml)')
        parser.add_argument('-v', '--verbose', action='count', default=0, help='Log more (-vv for debug)')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        blocks = subparsers.add_parser('blocks', help='Show blocks, batches and transactions')
        self._add_display_options(blocks)
        blocks.add_argument('--show-genesis', action='store_true', default=None,
                            help='Include the genesis (settings) block')
        blocks.set_defaults(func=self.show_blocks)

        state = subparsers.add_parser('state', help='Show data stored at state addresses')
        self._add_display_options(state)
        state.add_argument('--show-settings', dest='show_genesis', action='store_true', default=None,
                           help='Include addresses in the settings namespace')
        state.set_defaults(func=self.show_state)

        return parser

    def _add_display_options(self, parser: argparse.ArgumentParser):
        parser.add_argument('source', nargs='?', default=None,
                            help='Node URL or JSON file (default: configured node URL)')
        parser.add_argument('--full-ids', action='store_true', default=None,
                            help='Show full IDs and public keys')
        parser.add_argument('--scheme', default=None, help='Payload serialization scheme (cbor, json)')
        parser.add_argument('--color', dest='color', action='store_true', default=None,
                            help='Force coloured output')
        parser.add_argument('--no-color', dest='color', action='store_false', default=None,
                            help='Disable coloured output')

    def _configure_logging(self, verbose: int):
        if verbose >= 2:
            setup_logging(logging.DEBUG)
        elif verbose == 1:
            setup_logging(logging.INFO)
        else:
            setup_logging(self.config.get("logging.level", "WARNING"))

    def _apply_overrides(self, args):
        if args.full_ids is not None:
            self.config.update("display.full_ids", args.full_ids)
        if args.show_genesis is not None:
            self.config.update("display.show_genesis", args.show_genesis)
        if args.scheme is not None:
            self.config.update("display.scheme", args.scheme)
        if args.color is not None:
            self.config.update("display.color", args.color)

    def _colorized(self) -> bool:
        color = self.config.get("display.color")
        if color is None:
            return self.stdout.isatty()
        return bool(color)

    def _renderer(self) -> ReportRenderer:
        return ReportRenderer(self.config.render_config(), styler_for(self._colorized()))

    def _write(self, lines: List[str]):
        for line in lines:
            print(line, file=self.stdout)

    def show_blocks(self, args):
        renderer = self._renderer()
        data = LedgerReader(self.config).read_blocks(args.source)
        lines = renderer.render_blocks(data)
        print(f"Length: {data.num_blocks()}", file=self.stdout)
        self._write(lines)

    def show_state(self, args):
        renderer = self._renderer()
        data = LedgerReader(self.config).read_state(args.source)
        lines = renderer.render_state(data)
        print(f"Length: {data.num_states()}", file=self.stdout)
        self._write(lines)

def main(argv: Optional[List[str]] = None):
    cli = CLI()
    sys.exit(cli.main(sys.argv[1:] if argv is None else argv))

if __name__ == "__main__":
    main()
