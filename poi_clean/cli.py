import argparse
import logging
from typing import List, Optional

from .config import ConfigError, build_options, load_config
from .logging_setup import configure_logging
from .pipeline import CleanError, clean_csv


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='poi-clean',
        description='Reads a CSV exported from overpass-turbo.eu (out:csv ... out center) '
                    'and writes a cleaned CSV with columns id,name,lat,lon,x_m,y_m.',
    )
    p.add_argument('input', type=str, help='Overpass CSV export')
    p.add_argument('output', type=str, help='Cleaned CSV to write')
    p.add_argument('--require-name', action='store_true', default=None, help='drop rows without a name')
    p.add_argument('--min-name-len', type=int, metavar='N', default=None,
                   help='drop rows with name length < N (default 0)')
    p.add_argument('--dedupe', action='store_true', help='dedupe by (type,id) (default on)')
    p.add_argument('--keep-ways-only', dest='keep_type', action='store_const', const='way', default=None,
                   help='keep only ways (drop relations)')
    p.add_argument('--keep-relations-only', dest='keep_type', action='store_const', const='relation',
                   help='keep only relations (drop ways)')
    p.add_argument('--config', type=str, help='YAML file with option defaults')
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    try:
        cfg = load_config(args.config) if args.config else {}
        options = build_options(cfg, require_name=args.require_name, min_name_len=args.min_name_len,
                                keep_type=args.keep_type)
    except ConfigError as e:
        parser.error(str(e))

    try:
        clean_csv(args.input, args.output, options)
    except CleanError as e:
        logger.error(str(e))
        return 1
    return 0
