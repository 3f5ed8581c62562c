"""
Usernames follow the rules for the local part of an email address.

Character set is the one the WHATWG uses for email inputs, which excludes esoteric forms
like quoted strings: https://html.spec.whatwg.org/multipage/input.html#valid-e-mail-address
Length limit is from RFC 5321: https://datatracker.ietf.org/doc/html/rfc5321#section-4.5.3.1.1
"""

import re

from .exceptions import UsernameValidationException

USERNAME_MAX_LENGTH = 64

# re.ASCII keeps IGNORECASE from folding chars like U+212A KELVIN SIGN onto 'k'
username_regex = re.compile(r"[a-z0-9.!#$%&'*+/=?^_`{|}~-]+\Z", re.IGNORECASE | re.ASCII)


def validate_username(username):
    if not isinstance(username, str) or not username:
        return False

    # length is checked before the regex, and counts characters not bytes
    if len(username) > USERNAME_MAX_LENGTH:
        return False

    if not username_regex.match(username):  # matches only from beginning of string
        return False

    return True


def assert_valid_username(username):
    "Raise UsernameValidationException if the username doesn't validate"
    if not isinstance(username, str) or not username:
        raise UsernameValidationException('Empty username')
    if not validate_username(username):
        raise UsernameValidationException(f'Username `{username}` does not validate')
