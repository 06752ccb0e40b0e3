"""
Log wrapper record mutating operations of a map along with their arguments into a log.
It's used like a function-wrapper, bound on one instance only, other instances are
left untouched.
"""
import datetime
import functools
import logging
import types
from logging import handlers as log_handlers

from bstmap.constants import LOG_FILE_NAME

# if in debug mode
if __debug__:

    def _log_wrapper(func, logger: logging.Logger):
        logger.setLevel(logging.DEBUG)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            log = 'Called: ' + func.__name__ + '('
            # !r means call __repr__ only / !s means call __str__ only
            log += ','.join(['{0!r}'.format(a) for a in args] + ['{0!s}={1!r}'.format(k, v) for k, v in
                                                                 kwargs.items()])
            exception = None
            try:
                return func(self, *args, **kwargs)
            except Exception as error:
                exception = error
                raise
            finally:
                log += ')' if exception is None else ') {0}: {1}'.format(type(exception).__name__, exception)
                log += ' at {time}'.format(time=datetime.datetime.now().isoformat())
                logger.debug(log)

        return wrapper

else:
    def _log_wrapper(func, logger: logging.Logger):
        logger.setLevel(logging.INFO)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            log = 'Called: ' + func.__name__ + '('
            log += ','.join(['{0}'.format(a) for a in args] + ['{0}={1}'.format(k, v) for k, v in
                                                               kwargs.items()])
            log += ') at {time}'.format(time=datetime.datetime.now().isoformat())
            logger.info(log)
            return func(self, *args, **kwargs)

        return wrapper


def _make_handler(log_mode, host, port) -> logging.Handler:
    if log_mode == 'tcp' or log_mode == 'udp':
        if host is None or port is None:
            raise ValueError('Host and port of Log Socket should be specified')
        if log_mode == 'tcp':
            return log_handlers.SocketHandler(host=host, port=port)
        return log_handlers.DatagramHandler(host=host, port=port)
    elif log_mode == 'local':
        return logging.FileHandler(LOG_FILE_NAME, mode='a')
    elif log_mode == 'stream':
        return logging.StreamHandler()
    raise ValueError('Unknown log mode: {mode}'.format(mode=log_mode))


def log_wrapper(instance, methods_to_log: tuple, log_mode='local', host=None, port=None):
    """
    :param instance: instance to be logged
    :param methods_to_log: methods of instance to be logged (both method name, parameters, time
                           of invoking will be logged)
    :param log_mode: 'local': log in local file (log.log)
                     'stream': log to stderr
                     'tcp' or 'udp': log to concrete host & port
    :param host: target host if log mode is 'tcp' or 'udp'
    :param port: port of target host if log mode is 'tcp' or 'udp'
    :return: wrapped instance
    """
    orig_cls = instance.__class__
    # one child logger per instance
    logger = logging.getLogger('{module}.{name}'.format(module=orig_cls.__module__, name=orig_cls.__name__))
    logger = logger.getChild(str(id(instance)))
    handler = _make_handler(log_mode, host, port)
    logger.addHandler(handler)

    for name in methods_to_log:
        method = getattr(orig_cls, name, None)
        if method is None:
            continue
        setattr(instance, name, types.MethodType(_log_wrapper(method, logger), instance))

    # bind logger and handler with instance, so as to close handler later
    instance._logger = logger
    instance._log_handler = handler
    return instance


def close_log(instance):
    """Detach and close the handler attached by log_wrapper()."""
    handler = getattr(instance, '_log_handler', None)
    if handler is not None:
        instance._logger.removeHandler(handler)
        handler.close()
        del instance._log_handler
