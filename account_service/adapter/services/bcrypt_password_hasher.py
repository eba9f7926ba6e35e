import bcrypt

from account_service.app.services.password_hasher import IPasswordHasher

# bcrypt only looks at the first 72 bytes of the password
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt with a fresh random salt per hash"""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def _encode(self, password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]

    def hash(self, password: str) -> str:
        password_hash = bcrypt.hashpw(self._encode(password), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False
