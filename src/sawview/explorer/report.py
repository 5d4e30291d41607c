# File: src/sawview/explorer/report.py
"""Text reports over block and state data.

One traversal produces the lines for both output styles; the styler decides
whether identifiers, titles and payloads carry ANSI colour. Any payload
decoding error aborts the whole report.
"""
import logging
from typing import List, Optional

from rich.color import ColorSystem
from rich.style import Style

from ..blockchain.models import Batch, Block, BlockData, State, StateData, Transaction
from ..blockchain.payload import PayloadDecoder, SchemeRegistry
from ..utils.config import Config, RenderConfig
from ..utils.strings import shorten

logger = logging.getLogger(__name__)

SEPARATOR_LINES = ["\t\t| |", "\t\t| |", "\t\t\\ /", "\t\t V ", ""]

class PlainStyler:
    """No styling, for output redirected to a file"""

    def title(self, text: str) -> str:
        return text

    def identifier(self, text: str) -> str:
        return text

    def payload(self, text: str) -> str:
        return text

    def separator(self, text: str) -> str:
        return text

    def label(self, text: str) -> str:
        return text

class AnsiStyler(PlainStyler):
    """ANSI colours for terminal output"""

    TITLE = Style(color="green", bold=True, bgcolor="black")
    IDENTIFIER = Style(color="magenta")
    PAYLOAD = Style(color="blue")
    SEPARATOR = Style(color="green")
    LABEL = Style(color="green", bgcolor="black")

    def _render(self, style: Style, text: str) -> str:
        if not text:
            return text
        return style.render(text, color_system=ColorSystem.STANDARD)

    def title(self, text: str) -> str:
        return self._render(self.TITLE, text)

    def identifier(self, text: str) -> str:
        return self._render(self.IDENTIFIER, text)

    def payload(self, text: str) -> str:
        return self._render(self.PAYLOAD, text)

    def separator(self, text: str) -> str:
        return self._render(self.SEPARATOR, text)

    def label(self, text: str) -> str:
        return self._render(self.LABEL, text)

def styler_for(colorized: bool) -> PlainStyler:
    return AnsiStyler() if colorized else PlainStyler()

def _count_line(prefix: str, count: int, singular: str, plural: str, container: str) -> str:
    if count == 1:
        return f"{prefix}| There is 1 {singular} in this {container}"
    return f"{prefix}| There are {count} {plural} in this {container}"

class ReportRenderer:
    def __init__(
        self,
        config: RenderConfig,
        styler: Optional[PlainStyler] = None,
        registry: Optional[SchemeRegistry] = None
    ):
        self.config = config
        self.styler = styler or PlainStyler()
        # Fails here, before any line is produced, on an unknown scheme
        self.decoder = PayloadDecoder(config.payload_scheme, registry)

    def _id(self, value: str) -> str:
        if self.config.full_identifiers:
            return value
        return shorten(value, Config.PARTIAL_PREFIX_LENGTH, Config.PARTIAL_SUFFIX_LENGTH)

    def _payload_lines(self, payload: str, indent: int) -> List[str]:
        decoded = self.decoder.decode(payload, indent)
        lines = [self.styler.payload(line) for line in decoded.splitlines()]
        # Blank line after every decoded block
        lines.append("")
        return lines

    def render_blocks(self, data: BlockData) -> List[str]:
        """Render every visible block with its batches and transactions"""
        show_genesis = self.config.include_genesis_or_settings
        last_block_num = Config.GENESIS_BLOCK_NUM if show_genesis else Config.FIRST_BLOCK_NUM

        lines: List[str] = []
        for block in data.blocks:
            if block.is_genesis() and not show_genesis:
                continue
            logger.debug("Rendering block %s", block.header.block_num)
            lines.extend(self._block_lines(block))
            if block.header.block_num != last_block_num:
                lines.extend(self.styler.separator(line) for line in SEPARATOR_LINES)
        return lines

    def _block_lines(self, block: Block) -> List[str]:
        s = self.styler
        lines = [
            s.title(f"|Block {block.header.block_num} "),
            f"| ID: {s.identifier(self._id(block.header_signature))}",
            f"| Previous Block ID: {s.identifier(self._id(block.header.previous_block_id))}",
            f"| Signer Pub Key: {self._id(block.header.signer_public_key)}",
            _count_line("", block.num_batches(), "batch", "batches", "block"),
        ]
        for index, batch in enumerate(block.batches):
            lines.extend(self._batch_lines(block, index, batch))
        return lines

    def _batch_lines(self, block: Block, index: int, batch: Batch) -> List[str]:
        lines = [
            "\t" + self.styler.title(f"|Batch {index} "),
            f"\t| ID: {self._id(batch.header_signature)}",
            f"\t| Signer Pub Key: {self._id(batch.header.signer_public_key)}",
            _count_line("\t", batch.num_transactions(), "transaction", "transactions", "batch"),
        ]
        for txn_index, txn in enumerate(batch.transactions):
            lines.extend(self._transaction_lines(block, txn_index, txn))
        return lines

    def _transaction_lines(self, block: Block, index: int, txn: Transaction) -> List[str]:
        lines = [
            "\t\t" + self.styler.title(f"|Transaction {index} "),
            f"\t\t| ID: {self._id(txn.header_signature)}",
            f"\t\t| Signer Pub Key: {self._id(txn.header.signer_public_key)}",
            "\t\t| Payload:",
        ]
        if block.is_genesis():
            # Settings payloads use their own encoding, so show them as stored
            lines.append(self.styler.payload(txn.payload))
        else:
            lines.extend(self._payload_lines(txn.payload, Config.TRANSACTION_PAYLOAD_INDENT))
        return lines

    def render_state(self, data: StateData) -> List[str]:
        """Render every visible state address and its decoded data"""
        show_settings = self.config.include_genesis_or_settings

        lines: List[str] = []
        for state in data.entries:
            if not show_settings and state.is_settings():
                continue
            logger.debug("Rendering state at %s", state.address)
            lines.extend(self._state_lines(state))
        return lines

    def _state_lines(self, state: State) -> List[str]:
        lines = [
            f"{self.styler.label('State Address:')} {self._id(state.address)}",
            "\tData:",
        ]
        lines.extend(self._payload_lines(state.data, Config.STATE_PAYLOAD_INDENT))
        return lines

def render_blocks(data: BlockData, config: RenderConfig, colorized: bool) -> List[str]:
    return ReportRenderer(config, styler_for(colorized)).render_blocks(data)

def render_state(data: StateData, config: RenderConfig, colorized: bool) -> List[str]:
    return ReportRenderer(config, styler_for(colorized)).render_state(data)
