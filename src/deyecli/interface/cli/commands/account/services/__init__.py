from .token_command import TOKEN_KEY, TokenCommand, hash_password

__all__ = ["TOKEN_KEY", "TokenCommand", "hash_password"]
