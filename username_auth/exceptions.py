class ClientException(Exception):
    pass


class UsernameValidationException(ClientException):
    pass
