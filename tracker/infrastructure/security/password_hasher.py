"""Argon2 password hashing through passlib."""

from passlib.context import CryptContext

from tracker.domain.ports import PasswordHasher

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class Argon2PasswordHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        return pwd_context.verify(password, hashed)
