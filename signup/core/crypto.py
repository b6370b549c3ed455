from __future__ import annotations

import base64

from Crypto.Hash import MD5

HASH_MD5 = "md5"
HASH_BASE64 = "base64"
HEX_PREFIX = "0x"


def utf8_bytes(value: str) -> bytes:
    # lone surrogates become U+FFFD, as the game server's web frontend encoded them
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace").encode()


def password_digest(name: str, password: str) -> bytes:
    # unsalted, single pass; must match hashes already stored by the game server
    return MD5.new(utf8_bytes(name + password)).digest()


def hash_password(name: str, password: str, mode: str = HASH_BASE64) -> str:
    """
    Hash a password the way the legacy account database expects.

    Example: hash_password("player1", "secret1", "md5") -> "0x" + 32 hex chars
    """
    digest = password_digest(name, password)
    if mode == HASH_MD5:
        return HEX_PREFIX + digest.hex()
    return base64.b64encode(digest).decode()
