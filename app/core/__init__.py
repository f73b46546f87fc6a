"""Core application modules: security, exceptions, logging and request plumbing."""

from .security import create_access_token, decode_token, hash_password, verify_password

__all__ = ["create_access_token", "decode_token", "hash_password", "verify_password"]
