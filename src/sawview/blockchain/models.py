# File: src/sawview/blockchain/models.py
"""Records served by the ``/blocks`` and ``/state`` endpoints of a Sawtooth node.

The whole tree is validated in one call (``BlockData.from_json`` or
``StateData.from_json``) and is read-only afterwards.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import InvalidAddressLengthError
from ..utils.config import Config

ADDRESS_LENGTH = Config.ADDRESS_LENGTH
NAMESPACE_LENGTH = Config.NAMESPACE_LENGTH
GENESIS_BLOCK_NUM = Config.GENESIS_BLOCK_NUM
SETTINGS_NAMESPACE = Config.SETTINGS_NAMESPACE

class Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

class Paging(Record):
    """Paging element, only meaningful if the request asked for paging"""
    limit: Optional[str] = None
    start: Optional[str] = None

class TransactionHeader(Record):
    batcher_public_key: str
    dependencies: List[str]
    family_name: str
    family_version: str
    inputs: List[str]
    nonce: str
    outputs: List[str]
    payload_sha512: str
    signer_public_key: str

class Transaction(Record):
    """A transaction; ``payload`` is a serialized map encoded in base64"""
    header: TransactionHeader
    header_signature: str
    payload: str

class BatchHeader(Record):
    signer_public_key: str
    transaction_ids: List[str]

class Batch(Record):
    header: BatchHeader
    header_signature: str
    trace: bool
    transactions: List[Transaction]

    def num_transactions(self) -> int:
        return len(self.transactions)

class BlockHeader(Record):
    batch_ids: List[str]
    block_num: str
    consensus: str
    previous_block_id: str
    signer_public_key: str
    state_root_hash: str

class Block(Record):
    batches: List[Batch]
    header: BlockHeader
    header_signature: str

    def num_batches(self) -> int:
        return len(self.batches)

    def is_genesis(self) -> bool:
        """The genesis block carries settings rather than ordinary transactions"""
        return self.header.block_num == GENESIS_BLOCK_NUM

class BlockData(Record):
    """Root item of the ``/blocks`` endpoint"""
    blocks: List[Block] = Field(alias="data")
    head: str
    link: str
    paging: Paging

    def num_blocks(self) -> int:
        return len(self.blocks)

    @classmethod
    def from_json(cls, text) -> 'BlockData':
        return cls.model_validate_json(text)

class State(Record):
    """Data stored at a single state address"""
    address: str
    data: str

    def namespace(self) -> str:
        """Return the first 6 characters of a 70 character address"""
        if len(self.address) != ADDRESS_LENGTH:
            raise InvalidAddressLengthError(self.address, ADDRESS_LENGTH)
        return self.address[:NAMESPACE_LENGTH]

    def is_settings(self) -> bool:
        return self.namespace() == SETTINGS_NAMESPACE

class StateData(Record):
    """Root item of the ``/state`` endpoint"""
    entries: List[State] = Field(alias="data")
    head: str
    link: str
    paging: Paging

    def num_states(self) -> int:
        return len(self.entries)

    @classmethod
    def from_json(cls, text) -> 'StateData':
        return cls.model_validate_json(text)
