# tests/conftest.py
import os
import sys

import pytest

# Allow running from repo root without installing
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

# {'Value': 1, 'Verb': 'inc', 'Name': 'num1'} as CBOR
CBOR_PAYLOAD = "o2VWYWx1ZQFkVmVyYmNpbmNkTmFtZWRudW0x"
# {"Verb": "set", "Name": "a", "Value": 5} as JSON
JSON_PAYLOAD = "eyJWZXJiIjogInNldCIsICJOYW1lIjogImEiLCAiVmFsdWUiOiA1fQ=="
GENESIS_PAYLOAD = "CtoBCgxzYXd0b290aC5zZXR0aW5ncw=="

def make_id(prefix: str, suffix: str, length: int = 128) -> str:
    return prefix + "0" * (length - len(prefix) - len(suffix)) + suffix

def make_transaction(payload=CBOR_PAYLOAD, signature=None, signer=None):
    return {
        "header": {
            "batcher_public_key": make_id("02bat1", "b001", 66),
            "dependencies": [],
            "family_name": "intkey",
            "family_version": "1.0",
            "inputs": ["1cf126"],
            "nonce": "",
            "outputs": ["1cf126"],
            "payload_sha512": make_id("5ha512", "ffff"),
            "signer_public_key": signer or make_id("02txs1", "t001", 66),
        },
        "header_signature": signature or make_id("txn111", "tx01"),
        "payload": payload,
    }

def make_batch(transactions, signature=None):
    return {
        "header": {
            "signer_public_key": make_id("02bas1", "ba01", 66),
            "transaction_ids": [t["header_signature"] for t in transactions],
        },
        "header_signature": signature or make_id("bat111", "ba11"),
        "trace": False,
        "transactions": transactions,
    }

def make_block(block_num: str, batches, signature=None, previous=None):
    return {
        "batches": batches,
        "header": {
            "batch_ids": [b["header_signature"] for b in batches],
            "block_num": block_num,
            "consensus": "RGV2bW9kZQ==",
            "previous_block_id": previous or make_id("prev00", "pr0" + block_num),
            "signer_public_key": make_id("02blk1", "bk01", 66),
            "state_root_hash": make_id("root00", "rt01", 64),
        },
        "header_signature": signature or make_id("blk00" + block_num, "bk0" + block_num),
    }

def make_block_data(blocks):
    return {
        "data": blocks,
        "head": blocks[0]["header_signature"] if blocks else "",
        "link": "http://localhost:8008/blocks",
        "paging": {"limit": None, "start": None},
    }

def make_state_data(entries):
    return {
        "data": [{"address": address, "data": data} for address, data in entries],
        "head": make_id("blk001", "bk01"),
        "link": "http://localhost:8008/state",
        "paging": {"limit": None, "start": None},
    }

@pytest.fixture
def genesis_block():
    txn = make_transaction(payload=GENESIS_PAYLOAD)
    return make_block("0", [make_batch([txn])], previous="0000000000000000")

@pytest.fixture
def first_block():
    return make_block("1", [make_batch([make_transaction()])])

@pytest.fixture
def block_json(genesis_block, first_block):
    """Blocks as served by the REST API, newest first"""
    return make_block_data([first_block, genesis_block])

@pytest.fixture
def user_address():
    return make_id("1cf126", "dcab", 70)

@pytest.fixture
def settings_address():
    return make_id("000000", "5e77", 70)

@pytest.fixture
def state_json(user_address, settings_address):
    return make_state_data([
        (user_address, CBOR_PAYLOAD),
        (settings_address, CBOR_PAYLOAD),
    ])
