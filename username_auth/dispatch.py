import json
import logging

from .exceptions import ClientException
from .logging import LogLevelContext, handler_logging, logger


def response(status_code, data):
    return {'statusCode': status_code, 'body': json.dumps(data, default=str)}


def query_params(event, names):
    "Pull the named query string parameters out of an api gateway event, in order"
    params = event.get('queryStringParameters') or {}  # api gateway sends null when there are none
    missing = [name for name in names if name not in params]
    if missing:
        raise ClientException(f'Query parameter `{missing[0]}` is required')
    return [params[name] for name in names]


def handler(required_query_params=None):
    """
    Turn `func(event, context, *query_params)` into an api gateway lambda handler.

    The return value of `func` becomes a 200 response body, a ClientException becomes a
    400 with the error as its message. Anything else propagates.
    """
    required_query_params = required_query_params or []

    def decorator(func):
        @handler_logging(event_to_extras=lambda event: {'handler': func.__name__, 'event': event})
        def lambda_handler(event, context):
            with LogLevelContext(logger, logging.INFO):
                logger.info(f'Handling `{func.__name__}` event')
            try:
                data = func(event, context, *query_params(event, required_query_params))
            except ClientException as err:
                return response(400, {'message': str(err)})
            return response(200, data)

        return lambda_handler

    return decorator
