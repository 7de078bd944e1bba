# folderbench/cli.py

import argparse
import logging
import random
import sys

from folderbench import constants as c
from folderbench.benchmark import FilesPerFolderBenchmark
from folderbench.errors import BenchmarkError
from folderbench.params import validate
from folderbench.report import Reporter
from folderbench.store import open_store


logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Time the creation of many files in one folder on a file server')
    parser.add_argument('target',
                        help='Store root: a local/mounted directory or a WebDAV URL')
    parser.add_argument('--iterations', default=str(c.DEFAULT_ITERATIONS),
                        help='Number of benchmark cycles (default: %(default)s)')
    parser.add_argument('--filesize', default=c.DEFAULT_FILESIZE,
                        help='Target size per file, e.g. 4K, 10M (default: %(default)s)')
    parser.add_argument('--writesize', default=c.DEFAULT_WRITESIZE,
                        help='Size of each write, e.g. 512, 64K (default: %(default)s)')
    parser.add_argument('--filecount', default=str(c.DEFAULT_FILECOUNT),
                        help='Files created per iteration (default: %(default)s)')
    parser.add_argument('--name', default=c.DEFAULT_TEST_NAME,
                        help='Folder name prefix, one folder per iteration (default: %(default)s)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the file name random suffixes')
    parser.add_argument('--report', help='Append report lines to this file (default: stdout)')
    parser.add_argument('--cleanup', action='store_true',
                        help='Delete the created files and folders when done')
    parser.add_argument('--user', help='User name for HTTP basic auth')
    parser.add_argument('--password', default='', help='Password for HTTP basic auth')
    parser.add_argument('--timeout', type=float, default=c.HTTP_TIMEOUT_S,
                        help='HTTP request timeout in seconds (default: %(default)s)')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Basic logging setup
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s,%(levelname)s,%(name)s,%(message)s",
    )

    try:
        params = validate(iterations=args.iterations, filesize=args.filesize,
                          writesize=args.writesize, filecount=args.filecount)
    except BenchmarkError as e:
        logger.error("CLI,VALIDATE,ERROR,%s", e)
        return 1

    store_kwargs = {}
    if args.target.startswith(('http://', 'https://')):
        store_kwargs['timeout'] = args.timeout
        if args.user:
            store_kwargs['auth'] = (args.user, args.password)

    reporter = Reporter.to_file(args.report) if args.report else Reporter()
    try:
        store = open_store(args.target, **store_kwargs)
    except OSError as e:
        logger.error("CLI,OPEN_STORE,ERROR,target=%s,%s", args.target, e)
        reporter.close()
        return 1

    bench = FilesPerFolderBenchmark(store, params, rng=random.Random(args.seed),
                                    reporter=reporter, test_name=args.name)
    try:
        logger.debug("CLI,RUN,START,target=%s,params=%s", args.target, params)
        bench.run()
        logger.debug("CLI,RUN,END,SUCCESS,target=%s", args.target)
    except (BenchmarkError, OSError) as e:
        logger.exception("CLI,RUN,ERROR,%s", e)
        return 1
    finally:
        if args.cleanup:
            bench.cleanup()
        store.close()
        reporter.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
