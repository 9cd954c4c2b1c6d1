"""CLI entry point for the user CSV import.

Usage:
    python -m scripts.user_upload --create_table -u root -p secret [-h localhost] [--port 3306]
    python -m scripts.user_upload --file users.csv [--dry_run] -u root -p secret
"""

import argparse
import logging
import os

from ingestion.csv_ingest import IngestionError, ingest_csv
from ingestion.schema import ensure_users_table
from userdb import ConnectionConfig, ConnectionFailedError, create_service
from userdb.config import DATABASE_NAME, DEFAULT_DRIVER, DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1

PASSWORD_ENV = "USER_UPLOAD_DB_PASSWORD"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    # -h is the host flag, so help is --help only
    parser = argparse.ArgumentParser(
        description="Import users from a CSV file into the users table",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("--file", "-f", help="Path to the CSV file")
    parser.add_argument(
        "--create_table",
        action="store_true",
        help="Create the users table if it does not exist (no rows are imported)",
    )
    parser.add_argument(
        "--dry_run",
        action="store_true",
        help="Parse and validate the CSV without inserting data into the DB",
    )
    parser.add_argument("-u", dest="user", required=True, help="Database username")
    parser.add_argument(
        "-p",
        dest="password",
        default=os.environ.get(PASSWORD_ENV),
        help=f"Database password (default: ${PASSWORD_ENV})",
    )
    parser.add_argument("-h", dest="host", default=DEFAULT_HOST, help="Database host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Database port")
    parser.add_argument(
        "--driver",
        choices=["mysql", "postgresql", "sqlite"],
        default=DEFAULT_DRIVER,
        help="Database driver",
    )
    parser.add_argument(
        "--database",
        default=DATABASE_NAME,
        help="Database name (file path for sqlite)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.password is None:
        parser.error(f"the following arguments are required: -p (or set ${PASSWORD_ENV})")
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.create_table and not args.file:
        logger.info(
            "Please provide --create_table or --file. Use --help for more information."
        )
        return EXIT_OK

    config = ConnectionConfig(
        user=args.user,
        password=args.password,
        host=args.host,
        port=args.port,
        database=args.database,
        driver=args.driver,
    )
    logger.debug("Connecting with %r", config)

    service = create_service(config)
    try:
        service.connect()
    except ConnectionFailedError as e:
        logger.error("Error connecting to the database: %s", e)
        return EXIT_FATAL

    try:
        if args.create_table:
            ensure_users_table(service)
        else:
            ingest_csv(service, args.file, dry_run=args.dry_run)
    except IngestionError as e:
        logger.error("%s", e)
        return EXIT_FATAL
    finally:
        service.close()

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
