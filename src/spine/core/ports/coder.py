from typing import Any, Protocol


class Coder(Protocol):
    """Keyed store that resources encode themselves into and decode from."""

    def encode_value(self, value: Any, key: str) -> None: ...

    def encode_bool(self, value: bool, key: str) -> None: ...

    def decode_value(self, key: str) -> Any: ...

    def decode_bool(self, key: str) -> bool: ...

    def contains(self, key: str) -> bool: ...
