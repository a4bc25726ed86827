"""Board clients: where a finished Grid goes."""

from .base import BaseBoardClient, WriteResult, WriteStatus
from .http_delivery import HttpBoardClient
from .stdout_delivery import ConsoleBoardClient

__all__ = ["BaseBoardClient", "WriteResult", "WriteStatus", "HttpBoardClient", "ConsoleBoardClient"]
