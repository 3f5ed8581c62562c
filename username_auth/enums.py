class UsernameStatus:
    VALID = 'VALID'
    INVALID = 'INVALID'

    _ALL = (VALID, INVALID)
