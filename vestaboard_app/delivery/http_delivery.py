"""HTTP client for the Vestaboard read-write API."""

import json
import socket
import time
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from ..board.grid import Grid
from ..board.symbols import DEFAULT_CODEC, SymbolCodec
from ..config.defaults import BoardParams
from ..errors import BoardPermanentError, BoardRetryableError, BoardTransportError, GridShapeError
from ..logging import log_board_write
from .base import BaseBoardClient, WriteResult, WriteStatus

API_KEY_HEADER = "X-Vestaboard-Read-Write-Key"


class HttpBoardClient(BaseBoardClient):
    """Reads and writes the board over HTTPS. No retries."""

    def __init__(self, name: str, config: BoardParams, api_key: str,
                 codec: SymbolCodec = DEFAULT_CODEC):
        super().__init__(name, codec)
        self.config = config

        parsed = urlparse(config.url)
        if not parsed.scheme or not parsed.netloc:
            raise BoardPermanentError(f"Invalid URL: {config.url}")
        if not api_key:
            raise BoardPermanentError("Board API key is empty")
        self._api_key = api_key

    def _headers(self) -> dict[str, str]:
        return {
            'Content-Type': 'application/json',
            API_KEY_HEADER: self._api_key,
            'User-Agent': 'vestaboard-app/1.0',
        }

    def _request(self, method: str, body: Optional[bytes] = None) -> tuple[int, str]:
        """Issue one request; map failures onto the transport error types."""
        req = Request(self.config.url, data=body, headers=self._headers(), method=method)

        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                return response.getcode(), response.read().decode('utf-8')

        except HTTPError as e:
            error_msg = f"HTTP {e.code}: {e.reason}"
            self.logger.warning(
                "Board HTTP error",
                client=self.name,
                method=method,
                error_code=e.code,
                error_reason=str(e.reason)
            )
            if e.code >= 500:
                raise BoardRetryableError(error_msg, status_code=e.code) from e
            raise BoardPermanentError(error_msg, status_code=e.code) from e

        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning(
                "Board network error",
                client=self.name,
                method=method,
                error=str(e)
            )
            raise BoardRetryableError(f"Network error: {e}") from e

    def write(self, grid: Grid) -> WriteResult:
        """POST the grid's code matrix."""
        data = json.dumps(grid.to_codes(self.codec)).encode('utf-8')

        start_time = time.time()
        try:
            status_code, response_data = self._request("POST", data)
        except BoardTransportError as e:
            self._error_count += 1
            log_board_write(self.logger, self.name, False, e.status_code)
            raise
        write_time = int((time.time() - start_time) * 1000)

        self._write_count += 1
        log_board_write(self.logger, self.name, True, status_code,
                        context={"write_time_ms": write_time})
        return WriteResult(
            status=WriteStatus.SUCCESS,
            message=response_data[:100],
            status_code=status_code,
            write_time_ms=write_time,
        )

    def read(self) -> Grid:
        """GET the current message and decode its layout."""
        _, response_data = self._request("GET")

        try:
            payload: Any = json.loads(response_data)
            layout = payload["currentMessage"]["layout"]
            if isinstance(layout, str):
                layout = json.loads(layout)
        except (ValueError, KeyError, TypeError) as e:
            raise BoardPermanentError(f"Unexpected board response: {response_data[:100]}") from e

        try:
            return Grid.from_codes(layout, self.codec)
        except (GridShapeError, TypeError) as e:
            raise BoardPermanentError(f"Board returned a malformed layout: {e}") from e
