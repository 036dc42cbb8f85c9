"""
Crypto primitives: Ed25519 signing keypair, BLAKE3 public-key fingerprint.
"""
from typing import Dict

import blake3
from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey


class Keypair:
    """Ed25519 keypair for signing and verification."""
    def __init__(self, sk: SigningKey, vk: VerifyKey):
        self.sk = sk
        self.vk = vk

    @classmethod
    def generate(cls) -> 'Keypair':
        sk = SigningKey.generate()  # OS CSPRNG
        return cls(sk, sk.verify_key)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'Keypair':
        """Rebuild from the hex fields written by to_dict()."""
        try:
            sk = SigningKey(bytes.fromhex(data['secret']))
            vk = VerifyKey(bytes.fromhex(data['public']))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid keypair data: {e}") from e
        if sk.verify_key != vk:
            raise ValueError("Public key does not match secret key")
        return cls(sk, vk)

    def to_dict(self) -> Dict[str, str]:
        return {
            'public': self.vk.encode().hex(),
            'secret': self.sk.encode().hex(),
        }

    def sign(self, data: bytes) -> bytes:
        """Detached 64-byte signature over data."""
        return self.sk.sign(data).signature

    def verify(self, data: bytes, signature: bytes) -> bool:
        try:
            self.vk.verify(data, signature)
            return True
        except (BadSignatureError, ValueError, TypeError):
            return False

    def fingerprint(self) -> str:
        """BLAKE3 digest of the public key, shortened for display.

        Returns:
            16 hex chars (first 8 digest bytes)
        """
        return blake3.blake3(self.vk.encode()).hexdigest()[:16]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keypair):
            return NotImplemented
        return self.sk.encode() == other.sk.encode()

    def __repr__(self) -> str:
        return f"Keypair(public={self.vk.encode().hex()[:16]}...)"
