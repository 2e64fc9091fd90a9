import secrets

from src.app.services.token_generator import ITokenGenerator
from src.domain.entities import TOKEN_ALPHABET, TOKEN_LENGTH


class SecureTokenGenerator(ITokenGenerator):
    """
    Cryptographically secure token generator.

    Draws TOKEN_LENGTH symbols from the 64-character URL-safe alphabet
    (126 bits of entropy), so collisions are negligible.
    """

    def __init__(self, length: int = TOKEN_LENGTH, alphabet: str = TOKEN_ALPHABET):
        self.length = length
        self.alphabet = alphabet

    def generate(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))
