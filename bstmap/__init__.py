from bstmap.constants import METHODS_TO_LOG, MapConf
from bstmap.synchronized import SynchronizedBSTMap
from bstmap.tree import BSTMap, EmptyMapError
from bstmap.wrapper import log_wrapper

__version__ = '1.0.0'

__all__ = ('BSTMap', 'SynchronizedBSTMap', 'EmptyMapError', 'MapConf', 'create_map')


def create_map(*, check_invariants=False, synchronized=False, **kwargs):
    """
    :param check_invariants: validate the whole tree after every mutation (debug only, it's slow)
    :param synchronized: guard the map with a reader-writer lock for multi-thread use
    :param kwargs: log mode: 'log'='local' (log in local file (log.log)) or 'log'='stream'
                             'log'='tcp' or 'udp': log to concrete 'host' & 'port'
    """
    log_mode = kwargs.pop('log', None)
    host, port = kwargs.pop('host', None), kwargs.pop('port', None)
    if kwargs:
        raise TypeError('Unexpected keyword arguments: {args}'.format(args=', '.join(sorted(kwargs))))

    conf = MapConf(check_invariants=check_invariants)
    st = SynchronizedBSTMap(conf) if synchronized else BSTMap(conf)

    if log_mode == 'tcp' or log_mode == 'udp':
        if host is None or port is None:
            raise ValueError('Host and port of Log Socket should be specified')
        st = log_wrapper(st, METHODS_TO_LOG, log_mode=log_mode, host=host, port=port)
    elif log_mode is not None:
        st = log_wrapper(st, METHODS_TO_LOG, log_mode=log_mode)

    return st
