"""
Nostr public key as 32-byte lowercase hex.

Validates the textual form used inside tags (``p`` tags, the pubkey segment
of event coordinates) without performing curve arithmetic. Conversion to
and from ``nostr_sdk.PublicKey`` is available for callers that need the
SDK object (bech32 encoding, signature checks).
"""

from __future__ import annotations

from dataclasses import dataclass

from nostr_sdk import PublicKey as NostrPublicKey

from ._validation import is_lower_hex, validate_instance


_PUBKEY_HEX_LENGTH = 64


@dataclass(frozen=True, slots=True)
class PublicKey:
    """Immutable x-only public key in lowercase hex form.

    Attributes:
        hex: 64 lowercase hex characters (32 bytes).

    Raises:
        TypeError: If *hex* is not a string.
        ValueError: If *hex* is not exactly 64 lowercase hex characters.

    Examples:
        ```python
        pk = PublicKey.from_hex("a" * 64)
        pk.hex            # 'aaaa...'
        pk.to_bytes()     # b'\\xaa\\xaa...'
        PublicKey.from_hex("not-hex")   # None
        ```
    """

    hex: str

    def __post_init__(self) -> None:
        validate_instance(self.hex, str, "hex")
        if not is_lower_hex(self.hex, _PUBKEY_HEX_LENGTH):
            raise ValueError(f"Public key must be {_PUBKEY_HEX_LENGTH} lowercase hex characters")

    @classmethod
    def from_hex(cls, value: str) -> PublicKey | None:
        """Parse a hex string, returning ``None`` instead of raising on malformed input."""
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None

    @classmethod
    def from_bytes(cls, value: bytes) -> PublicKey:
        """Build a public key from its 32-byte binary form."""
        return cls(value.hex())

    def to_bytes(self) -> bytes:
        return bytes.fromhex(self.hex)

    @classmethod
    def from_nostr(cls, public_key: NostrPublicKey) -> PublicKey:
        """Wrap a ``nostr_sdk.PublicKey``."""
        return cls(public_key.to_hex())

    def to_nostr(self) -> NostrPublicKey:
        """Convert to a ``nostr_sdk.PublicKey``.

        Raises:
            nostr_sdk.NostrError: If the hex does not encode a valid curve point.
        """
        return NostrPublicKey.parse(self.hex)

    def to_bech32(self) -> str:
        """Return the NIP-19 ``npub1...`` encoding."""
        return self.to_nostr().to_bech32()

    def __str__(self) -> str:
        return self.hex
