"""
Legacy protection password.

The 16-bit hash below is what the file format stores for sheet and workbook
protection. It is trivially reversible and only exists for file compatibility.
"""

from __future__ import annotations

__all__ = ["LegacyPassword", "PasswordType", "generate_legacy_password_hash"]

from enum import IntEnum


class PasswordType(IntEnum):
    WORKBOOK_PROTECTION = 0
    WORKSHEET_PROTECTION = 1


def generate_legacy_password_hash(password: str | None) -> str:
    if not password:
        return ""
    h = 0
    for ch in reversed(password):
        h = ((h >> 14) & 0x01) | ((h << 1) & 0x7FFF)
        h ^= ord(ch)
    h = ((h >> 14) & 0x01) | ((h << 1) & 0x7FFF)
    h ^= 0x8000 | (ord("N") << 8) | ord("K")
    h ^= len(password)
    return f"{h:X}"


class LegacyPassword:
    __slots__ = ("type", "_password", "_hash")

    def __init__(self, type: PasswordType) -> None:  # noqa: A002
        self.type = PasswordType(type)
        self._password: str | None = None
        self._hash = ""

    @property
    def password(self) -> str | None:
        return self._password

    @property
    def password_hash(self) -> str:
        return self._hash

    def set_password(self, password: str | None) -> None:
        if not password:
            self.unset_password()
            return
        self._password = password
        self._hash = generate_legacy_password_hash(password)

    def set_password_hash(self, password_hash: str | None) -> None:
        """Restore a stored hash, the plain text stays unknown"""
        self._password = None
        self._hash = (password_hash or "").upper()

    def unset_password(self) -> None:
        self._password = None
        self._hash = ""

    def password_is_set(self) -> bool:
        return bool(self._hash)

    def copy_from(self, other: LegacyPassword) -> None:
        self._password = other._password
        self._hash = other._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LegacyPassword):
            return NotImplemented
        return self.type == other.type and self._hash == other._hash

    __hash__ = None  # type: ignore[assignment]
