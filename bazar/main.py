import argparse
import logging
import sys
from typing import List, Optional

from bazar import VERSION
from bazar.bazar import Bazar


def parse_cmdline(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='bazar', usage='%(prog)s -k K -d DICO [PAGE]...',
        description='Group text pages into chapters by shared dictionary words.')
    parser.add_argument(
        '-k', '--k', type=int, dest='k', required=True, metavar='K',
        help='minimal number of words a page must share with a chapter '
             'to join it')
    parser.add_argument(
        '-d', '--dico', type=str, dest='dico', required=True, metavar='DICO',
        help='dictionary file path')
    parser.add_argument(
        '--debug', action='store_true', dest='debug',
        help='print debugging information')
    parser.add_argument(
        '--version', action='version',
        version='%(prog)s ' + '.'.join(str(d) for d in VERSION))
    parser.add_argument('pages', nargs='+', metavar='PAGE')
    args = parser.parse_args(argv)

    if args.k < 0:
        parser.error('K must be a non-negative integer')

    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_cmdline(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    try:
        bazar = Bazar(args.k, args.dico, args.pages)
    except OSError as e:
        print(e, file=sys.stderr)
        return 1

    chapters = bazar.resolve()
    print('\n\n'.join(str(chapter) for chapter in chapters))
    return 0


if __name__ == '__main__':
    sys.exit(main())
