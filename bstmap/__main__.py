"""
Demo: feed every character of a text file (spaces excluded) into a map and
print the map in level order, then in key order.

    python -m bstmap [FILE] [--encoding ENC]
"""
import argparse
import logging
import sys

from bstmap.constants import DEFAULT_LOGGER_NAME
from bstmap.tree import BSTMap
from bstmap.utils import iter_chars

logger = logging.getLogger(DEFAULT_LOGGER_NAME)

DEFAULT_FILE_NAME = 'test.txt'


def build_char_map(chars) -> BSTMap:
    """
    :param chars: iterable of one-character strings.
    :return: map from character to the count of characters inserted before its last occurrence.
    """
    st = BSTMap()
    count = 0
    for ch in chars:
        if ch != ' ':
            st.put(ch, count)
            count += 1
    return st


def dump(st: BSTMap, out=None):
    if out is None:
        out = sys.stdout
    for key in st.level_order():
        print('{0} {1}'.format(key, st.get(key)), file=out)
    print(file=out)
    for key in st.keys():
        print('{0} {1}'.format(key, st.get(key)), file=out)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='bstmap', description='Print the characters of a file through a BST.')
    parser.add_argument('file', nargs='?', default=DEFAULT_FILE_NAME)
    parser.add_argument('--encoding', default=None, help='defaults to the platform encoding')
    args = parser.parse_args(argv)
    try:
        st = build_char_map(iter_chars(args.file, args.encoding))
    except (OSError, UnicodeDecodeError) as error:
        logger.error('Can not read %s: %s', args.file, error)
        return 1
    dump(st)
    return 0


if __name__ == '__main__':
    logging.basicConfig()
    sys.exit(main())
