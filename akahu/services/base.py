from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import AkahuClient


class Service:
    def __init__(self, client: "AkahuClient"):
        self._client = client
