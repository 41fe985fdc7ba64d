"""
Canonical signer for EuPlatesc payloads.

Every signed value is framed as ``<length><value>`` (or ``-`` when empty) and the
framed values are concatenated in field order before HMAC-MD5 is applied.
"""
import hashlib
import hmac
from typing import Any, Iterable, Iterator, Mapping

EMPTY_PLACEHOLDER = "-"


class FieldSet:
    """
    Ordered (name, value) pairs over which a signature is computed.

    Values are rendered as text on insertion. ``None`` is never stored: an absent
    field and an empty string are different signed states.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str, Any]] | Mapping[str, Any] | None = None):
        self._items: list[tuple[str, str]] = []
        if items is None:
            return
        if isinstance(items, Mapping):
            items = items.items()
        for name, value in items:
            self.add(name, value)

    def add(self, name: str, value: Any) -> "FieldSet":
        if value is None:
            return self
        if any(existing == name for existing, _ in self._items):
            raise ValueError(f"Field {name!r} is already present")
        self._items.append((name, value if isinstance(value, str) else str(value)))
        return self

    def names(self) -> list[str]:
        return [name for name, _ in self._items]

    def values(self) -> list[str]:
        return [value for _, value in self._items]

    def as_dict(self) -> dict[str, str]:
        return dict(self._items)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return any(existing == name for existing, _ in self._items)

    def __repr__(self) -> str:
        return f"<FieldSet names={self.names()!r}>"


def frame(values: Iterable[str]) -> str:
    """Build the HMAC input string from values in signing order."""
    return "".join(
        f"{len(value)}{value}" if len(value) > 0 else EMPTY_PLACEHOLDER
        for value in values
    )


def sign(fields: FieldSet | Mapping[str, Any], key: bytes) -> str:
    """
    Compute the upper-case hex HMAC-MD5 signature of an ordered field set.

    Args:
        fields: Ordered fields to sign. A mapping is taken in its iteration order.
        key: Raw key bytes (already decoded from hex).

    Returns:
        str: 32 upper-case hexadecimal characters.
    """
    if not isinstance(fields, FieldSet):
        fields = FieldSet(fields)
    message = frame(fields.values()).encode("utf-8")
    return hmac.new(key, message, hashlib.md5).hexdigest().upper()


def signatures_match(expected: str, supplied: str | None) -> bool:
    """Case-sensitive, constant-time signature comparison."""
    if not supplied:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))
