"""
Hashing and key helpers shared by the chain packages.
"""
import hashlib

from Crypto.Hash import RIPEMD160
from eth_keys import keys
from eth_keys.exceptions import ValidationError as EthKeysValidationError

from .exceptions import InvalidInputError

SECP256K1_COMPRESSED_LEN = 33
SECP256K1_UNCOMPRESSED_LEN = 65
SECP256K1_RAW_LEN = 64

# Field prime of secp256k1, curve y^2 = x^3 + 7 (mod p)
SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha256_hex(data: bytes) -> str:
    """Lowercase hex SHA-256 digest of data."""
    return hashlib.sha256(data).hexdigest()


def hash160(data: bytes) -> bytes:
    """RIPEMD-160 of SHA-256, as used by Bitcoin and Cosmos addresses."""
    return RIPEMD160.new(sha256(data)).digest()


def load_secp256k1_public_key(public_key_bytes: bytes) -> keys.PublicKey:
    """
    Parse a secp256k1 public key in any of its common encodings.

    Accepts 33-byte compressed, 65-byte uncompressed (0x04 prefix) and 64-byte
    raw (x || y) keys.

    Raises:
        InvalidInputError: If the key has the wrong length or is not on the curve
    """
    length = len(public_key_bytes)
    public_key = None
    try:
        if length == SECP256K1_COMPRESSED_LEN:
            public_key = keys.PublicKey.from_compressed_bytes(public_key_bytes)
        elif length == SECP256K1_UNCOMPRESSED_LEN and public_key_bytes[0] == 0x04:
            public_key = keys.PublicKey(public_key_bytes[1:])
        elif length == SECP256K1_RAW_LEN:
            public_key = keys.PublicKey(public_key_bytes)
    except (EthKeysValidationError, ValueError) as e:
        raise InvalidInputError(f"invalid secp256k1 public key: {e}") from e
    if public_key is None:
        raise InvalidInputError(f"invalid secp256k1 public key length: {length}")
    if not is_on_secp256k1_curve(public_key.to_bytes()):
        raise InvalidInputError("invalid secp256k1 public key: point is not on the curve")
    return public_key


def compress_secp256k1_public_key(public_key_bytes: bytes) -> bytes:
    """Return the 33-byte compressed form of a secp256k1 public key."""
    if len(public_key_bytes) == SECP256K1_COMPRESSED_LEN:
        # still parse it so malformed keys are rejected
        load_secp256k1_public_key(public_key_bytes)
        return public_key_bytes
    return load_secp256k1_public_key(public_key_bytes).to_compressed_bytes()


def is_on_secp256k1_curve(raw_public_key: bytes) -> bool:
    """Check that a 64-byte x || y public key is a point on secp256k1."""
    if len(raw_public_key) != SECP256K1_RAW_LEN:
        return False
    x = int.from_bytes(raw_public_key[:32], "big")
    y = int.from_bytes(raw_public_key[32:], "big")
    if x >= SECP256K1_P or y >= SECP256K1_P:
        return False
    return (y * y - x * x * x - 7) % SECP256K1_P == 0
