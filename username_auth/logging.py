import json
import logging

logger = logging.getLogger()


def use_cloudwatch_formatter(extras=None):
    "Lambda puts its own handler on the root logger, point it (and any others) at our formatter"
    for log_handler in logger.handlers:
        log_handler.setFormatter(CloudWatchFormatter(extras=extras))


def handler_logging(event_to_extras=None):
    """
    Decorator for lambda handlers. Every record logged during the call carries the
    extras that `event_to_extras(event)` returns, and uncaught errors are logged as json
    before they continue on to the lambda runtime.
    """

    def decorator(func):
        def wrapper(event, context):
            use_cloudwatch_formatter(extras=event_to_extras(event) if event_to_extras else None)
            try:
                return func(event, context)
            except Exception as err:
                logger.exception(f'Uncaught error: {err}')
                raise

        return wrapper

    return decorator


# https://docs.python.org/3/howto/logging-cookbook.html#using-a-context-manager-for-selective-logging
class LogLevelContext:
    def __init__(self, logger, level):
        self.logger = logger
        self.level = level

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.level)

    def __exit__(self, et, ev, tb):
        self.logger.setLevel(self.old_level)


class CloudWatchFormatter(logging.Formatter):
    "One json document per record, prefixed the way the lambda runtime prefixes its own lines"

    lambda_path_prefix = '/var/task/'

    def __init__(self, extras=None, **kwargs):
        self.extras = extras or {}
        super().__init__(**kwargs)

    def source_file(self, record):
        if record.pathname.startswith(self.lambda_path_prefix):
            return record.pathname[len(self.lambda_path_prefix) :]
        return record.pathname

    def format(self, record):
        # set by the lambda runtime, absent when running locally
        request_id = getattr(record, 'aws_request_id', None)

        # message goes first so CloudWatch's summary column shows it
        data = {'message': record.getMessage(), 'level': record.levelname, 'requestId': request_id}
        data.update(self.extras)
        data['sourceFile'] = self.source_file(record)
        data['sourceLine'] = record.lineno

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            data['exceptionInfo'] = record.exc_text.split('\n')
        if record.stack_info:
            data['stackInfo'] = record.stack_info.split('\n')
        return f'{record.levelname} RequestId: {request_id} Data: {json.dumps(data, default=str)}'


use_cloudwatch_formatter()
