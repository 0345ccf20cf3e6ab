"""
Commitment generator for the fair random exchange.

The computer draws its number and a fresh 256-bit key, then publishes
HMAC-SHA256(key, number). The digest binds the computer to the number without
revealing it; once the key is disclosed anyone can recompute the digest.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Callable

from .errors import EntropySourceUnavailable
from .logging_config import setup_logger

logger = setup_logger(__name__)

KEY_SIZE = 32


def calculate_hmac(key: bytes, value: int) -> str:
    message_bytes = str(value).encode('utf-8')
    h = hmac.new(key, message_bytes, hashlib.sha256)
    return h.hexdigest().upper()


def verify_commitment(key: bytes, value: int, digest: str) -> bool:
    return hmac.compare_digest(calculate_hmac(key, value), digest.upper())


@dataclass(frozen=True)
class SecretCommitment:
    key: bytes
    value: int
    hmac: str

    @property
    def key_hex(self) -> str:
        return self.key.hex().upper()


class CommitmentGenerator:
    def __init__(self, random_bytes: Callable[[int], bytes] = secrets.token_bytes):
        self._random_bytes = random_bytes

    def _read(self, size: int) -> bytes:
        try:
            data = self._random_bytes(size)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceUnavailable(f"Secure random source failed: {e}") from e
        if len(data) != size:
            raise EntropySourceUnavailable(
                f"Secure random source returned {len(data)} bytes, expected {size}"
            )
        return data

    def generate_key(self) -> bytes:
        return self._read(KEY_SIZE)

    def generate_secure_random(self, min_value: int, max_value: int) -> int:
        """
        Draw an integer uniformly from [min_value, max_value].

        Draws that fall at or above the largest multiple of the range width
        representable in the byte width are rejected, so no value is favoured
        by the final modulo.
        """
        width = max_value - min_value + 1
        byte_count = max(1, ((width - 1).bit_length() + 7) // 8)
        limit = (256 ** byte_count // width) * width
        while True:
            draw = int.from_bytes(self._read(byte_count), 'big')
            if draw < limit:
                return draw % width + min_value

    def generate(self, min_value: int, max_value: int) -> SecretCommitment:
        if not isinstance(min_value, int) or not isinstance(max_value, int):
            raise TypeError("Range bounds must be integers.")
        if min_value > max_value:
            raise ValueError(f"Invalid range {min_value}..{max_value}: min must not exceed max.")

        key = self.generate_key()
        value = self.generate_secure_random(min_value, max_value)
        commitment = SecretCommitment(key=key, value=value, hmac=calculate_hmac(key, value))
        logger.debug(f"Committed to a value in {min_value}..{max_value} (HMAC={commitment.hmac})")
        return commitment
