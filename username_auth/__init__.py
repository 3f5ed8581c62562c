__all__ = [
    'assert_valid_username',
    'validate_username',
]

from .validate import assert_valid_username, validate_username
