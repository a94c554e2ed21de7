from __future__ import annotations


class CipherError(ValueError):
    """Base class for every validation error raised by the engine."""


class InvalidVariant(CipherError):
    pass


class InvalidKeyLength(CipherError):
    pass


class InvalidBlockLength(CipherError):
    pass


class UnsupportedRotationAmount(CipherError):
    pass
