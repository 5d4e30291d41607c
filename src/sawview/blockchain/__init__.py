from .models import (
    Batch,
    BatchHeader,
    Block,
    BlockData,
    BlockHeader,
    Paging,
    State,
    StateData,
    Transaction,
    TransactionHeader,
)
from .payload import PayloadDecoder, SchemeRegistry, decode, register_scheme

__all__ = [
    "Batch",
    "BatchHeader",
    "Block",
    "BlockData",
    "BlockHeader",
    "Paging",
    "State",
    "StateData",
    "Transaction",
    "TransactionHeader",
    "PayloadDecoder",
    "SchemeRegistry",
    "decode",
    "register_scheme",
]
