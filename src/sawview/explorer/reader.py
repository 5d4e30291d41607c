# File: src/sawview/explorer/reader.py
"""Load ``/blocks`` and ``/state`` data from a file or a node's REST API."""
import logging
from typing import Optional, Type, TypeVar

import requests
from pydantic import ValidationError

from ..blockchain.models import BlockData, StateData
from ..exceptions import DataFormatError, DataSourceError, FetchError
from ..utils.config import Config, ViewerConfig

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", BlockData, StateData)

def _read_file(filepath: str, model: Type[RecordT], kind: str) -> RecordT:
    try:
        with open(filepath, 'r') as f:
            text = f.read()
    except OSError as e:
        raise DataSourceError(f"Unable to open file for reading {kind} data: {e}")

    try:
        return model.from_json(text)
    except ValidationError as e:
        raise DataFormatError(f"Error in parsing {kind} data file: {e}")

def read_block_data_from_file(filepath: str) -> BlockData:
    """Read data saved from the /blocks endpoint"""
    return _read_file(filepath, BlockData, "block")

def read_state_data_from_file(filepath: str) -> StateData:
    """Read data saved from the /state endpoint"""
    return _read_file(filepath, StateData, "state")

def _read_endpoint(
    url: str,
    model: Type[RecordT],
    endpoint: str,
    kind: str,
    timeout: Optional[float],
    session: Optional[requests.Session]
) -> RecordT:
    owns_session = session is None
    session = session or requests.Session()
    try:
        logger.info("GET %s", url)
        try:
            response = session.get(
                url,
                timeout=timeout or Config.REQUEST_TIMEOUT,
                allow_redirects=False
            )
        except requests.RequestException as e:
            raise FetchError(f"Error in trying to make GET Request to server: {e}")

        status = response.status_code
        if 400 <= status < 600:
            raise FetchError(
                f"Error code {status} when trying to get /{endpoint} endpoint",
                status_code=status
            )
        if not 200 <= status < 300:
            raise FetchError(
                f"Unexpected code {status} when trying to get /{endpoint} endpoint",
                status_code=status
            )

        try:
            return model.from_json(response.content)
        except ValidationError as e:
            raise DataFormatError(f"Error in parsing {kind} JSON: {e}")
    finally:
        if owns_session:
            session.close()

def read_block_data_from_endpoint(
    url: str,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None
) -> BlockData:
    """GET the /blocks endpoint"""
    return _read_endpoint(url, BlockData, Config.BLOCKS_ENDPOINT, "block", timeout, session)

def read_state_data_from_endpoint(
    url: str,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None
) -> StateData:
    """GET the /state endpoint"""
    return _read_endpoint(url, StateData, Config.STATE_ENDPOINT, "state", timeout, session)

def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))

def endpoint_url(base_url: str, endpoint: str) -> str:
    """Append the endpoint path unless the URL already names it"""
    path = base_url.split("?", 1)[0].rstrip("/")
    if path.rsplit("/", 1)[-1] == endpoint:
        return base_url
    if "?" in base_url:
        query = base_url.split("?", 1)[1]
        return f"{path}/{endpoint}?{query}"
    return f"{path}/{endpoint}"

class LedgerReader:
    """Pick a file or endpoint reader from a source string"""

    def __init__(self, config: Optional[ViewerConfig] = None):
        self.config = config or ViewerConfig()

    def _source(self, source: Optional[str]) -> str:
        return source or self.config.get("node.url", Config.DEFAULT_NODE_URL)

    def _timeout(self) -> float:
        return self.config.timeout()

    def read_blocks(self, source: Optional[str] = None) -> BlockData:
        source = self._source(source)
        if is_url(source):
            return read_block_data_from_endpoint(
                endpoint_url(source, Config.BLOCKS_ENDPOINT), self._timeout()
            )
        return read_block_data_from_file(source)

    def read_state(self, source: Optional[str] = None) -> StateData:
        source = self._source(source)
        if is_url(source):
            return read_state_data_from_endpoint(
                endpoint_url(source, Config.STATE_ENDPOINT), self._timeout()
            )
        return read_state_data_from_file(source)
