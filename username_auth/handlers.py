from .dispatch import handler
from .enums import UsernameStatus
from .validate import validate_username


@handler(required_query_params=['username'])
def get_username_status(event, context, username):
    status = UsernameStatus.VALID if validate_username(username) else UsernameStatus.INVALID
    return {'status': status}
