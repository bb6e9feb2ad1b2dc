"""Security helpers."""
from mototrack.security.passwords import get_password_hash, verify_password

__all__ = ["get_password_hash", "verify_password"]
