from collections import namedtuple

__all__ = ['DEFAULT_LOGGER_NAME', 'LOG_FILE_NAME', 'METHODS_TO_LOG', 'MapConf', 'DEFAULT_MAP_CONF']

DEFAULT_LOGGER_NAME = 'Logger'

# file used by the 'local' log mode
LOG_FILE_NAME = 'log.log'

METHODS_TO_LOG = (
    'put',
    'delete',
    'delete_min',
    'delete_max',
)

MapConf = namedtuple('MapConf', [
    'check_invariants',  # run validate() after every mutation (skipped under python -O)
])

DEFAULT_MAP_CONF = MapConf(check_invariants=False)
