import secrets

from account_service.app.services.token_generator import ITokenGenerator


class SecureTokenGenerator(ITokenGenerator):
    """Hex-encoded token from the OS CSPRNG (32 bytes -> 64 chars by default)"""

    def __init__(self, nbytes: int = 32):
        if nbytes < 16:
            raise ValueError("Reset tokens need at least 16 bytes (128 bits) of entropy")
        self.nbytes = nbytes

    def generate(self) -> str:
        return secrets.token_hex(self.nbytes)
