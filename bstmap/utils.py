"""
  This include some helper-functions.
"""
import locale


def default_encoding() -> str:
    """Platform default text encoding."""
    return locale.getpreferredencoding(False)


def iter_chars(file_name, encoding: str = None):
    """
    Yield characters of a text file one at a time.
    :param encoding: if None, decode with the platform default encoding.
    """
    with open(file_name, 'r', encoding=encoding or default_encoding()) as f:
        while True:
            ch = f.read(1)
            if ch == '':
                return
            yield ch
