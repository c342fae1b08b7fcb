"""AES in CFB mode, keyed and seeded from a text key."""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_SIZE = 16
_MIN_KEY_LENGTH = 16


class AesEncrypt:
    """Encrypts and decrypts text with AES-CFB.

    The key is the first 32, 24 or 16 bytes of the text key, the longest that
    fits; the IV is the first 16 bytes of that key.
    """

    def __init__(self, key: str) -> None:
        if len(key.encode("utf-8")) < _MIN_KEY_LENGTH:
            raise ValueError("The length of res key shall not be less than 16")
        self.key = key

    def _cipher(self) -> Cipher:
        raw = self.key.encode("utf-8")
        if len(raw) < _MIN_KEY_LENGTH:
            raise ValueError("The length of res key shall not be less than 16")
        size = next(size for size in (32, 24, 16) if len(raw) >= size)
        key = raw[:size]
        return Cipher(algorithms.AES(key), modes.CFB(key[:_BLOCK_SIZE]))

    def encrypt(self, message: str) -> bytes:
        """Encrypt ``message``; the result has as many bytes as its UTF-8 form."""
        encryptor = self._cipher().encryptor()
        return encryptor.update(message.encode("utf-8")) + encryptor.finalize()

    def decrypt(self, data: bytes) -> str:
        """Decrypt ``data`` back to text."""
        decryptor = self._cipher().decryptor()
        plain = decryptor.update(bytes(data)) + decryptor.finalize()
        return plain.decode("utf-8", "surrogateescape")