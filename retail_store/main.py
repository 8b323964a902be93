import argparse
import sys

from retail_store.cli.retail_cli import RetailCLI
from retail_store.config import config
from retail_store.db import db
from retail_store.exceptions import RetailError
from retail_store.logging_setup import logger, log_exception

def build_parser():
    """Command-line arguments: <dbname> <port> <user>."""
    parser = argparse.ArgumentParser(
        prog='retail-store',
        description='Online Retail Store client'
    )
    parser.add_argument('dbname', help='Name of the retail database')
    parser.add_argument('port', help='Port the database server listens on')
    parser.add_argument('user', help='Database user name')
    parser.add_argument('--host', default=None,
                        help='Database host (default: from settings.ini)')
    parser.add_argument('--password', default=None,
                        help='Database password (default: from settings.ini, empty)')
    return parser

def init_application(args):
    """Connect to the database; exits the process on failure."""
    log = logger.app_logger
    try:
        db.initialize(args.dbname, args.port, args.user, password=args.password, host=args.host)
    except RetailError as e:
        log_exception('app', e, "Error")
        print("Make sure you started postgres on this machine")
        sys.exit(1)

    log.info(f"Using database: {config.get('DATABASE', 'engine')} "
             f"at {args.host or config.get('DATABASE', 'host')}:{args.port}/{args.dbname}")

def main(argv=None):
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    init_application(args)
    try:
        RetailCLI(db).run()
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted by user. Exiting.")
    finally:
        print("Disconnecting from database...", end='')
        db.cleanup()
        print("Done\n\nBye !")

if __name__ == "__main__":
    main()
