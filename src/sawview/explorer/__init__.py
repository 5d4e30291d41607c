from .reader import (
    LedgerReader,
    read_block_data_from_endpoint,
    read_block_data_from_file,
    read_state_data_from_endpoint,
    read_state_data_from_file,
)
from .report import AnsiStyler, PlainStyler, ReportRenderer, render_blocks, render_state

__all__ = [
    "LedgerReader",
    "read_block_data_from_endpoint",
    "read_block_data_from_file",
    "read_state_data_from_endpoint",
    "read_state_data_from_file",
    "AnsiStyler",
    "PlainStyler",
    "ReportRenderer",
    "render_blocks",
    "render_state",
]
