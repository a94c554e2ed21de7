from __future__ import annotations

from dataclasses import dataclass

from .pipeline import decrypt_block, encrypt_block
from .schedule import KeySchedule, expand_key
from .spec import VariantDescriptor
from .validator import ensure_valid_variant


class BlockCipher:
    def encrypt_block(self, plaintext_block: bytes, key: bytes) -> bytes:  # pragma: no cover
        raise NotImplementedError

    def decrypt_block(self, ciphertext_block: bytes, key: bytes) -> bytes:  # pragma: no cover
        raise NotImplementedError


@dataclass
class VariantCipher(BlockCipher):
    """Key-per-call wrapper used by the evaluation tools.

    Each call expands the key afresh; callers encrypting many blocks under
    one key should call ``expand_key`` once and use the pipeline directly.
    """
    variant: VariantDescriptor

    def schedule(self, key: bytes) -> KeySchedule:
        return expand_key(self.variant, key)

    def encrypt_block(self, plaintext_block: bytes, key: bytes) -> bytes:
        return encrypt_block(self.schedule(key), plaintext_block)

    def decrypt_block(self, ciphertext_block: bytes, key: bytes) -> bytes:
        return decrypt_block(self.schedule(key), ciphertext_block)


def build_cipher(variant: VariantDescriptor) -> BlockCipher:
    return VariantCipher(variant=ensure_valid_variant(variant))
