"""
=========================================================
Command-line entry point for the SQL formatter.
=========================================================

Formats one SQL statement passed as an argument and prints the result to
standard output. Logging goes to stderr so the output can be piped.

Usage:
    # Format with the configured default indentation
    python main.py "select a, b from t where a = 1"

    # Format with 2-space indentation
    python main.py --indent 2 "update t set a = 1 where id = 3"

    # Show routing decisions
    python main.py --verbose "create table t (id int)"

Exit Codes:
    0: Success
    1: Error (invalid indentation, unexpected failure)
    2: Usage error (missing SQL argument)
    130: User interrupt (Ctrl+C)
"""

import argparse
import sys

from core.config import config
from core.logger import get_logger, setup_logging
from sqlformatter.formatter import SqlFormatter

logger = get_logger(__name__)


def main():
    """
    Command-line interface for the SQL formatter.

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(
        description="SQL formatter - re-indents DML and DDL statements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py "select a, b from t where a = 1"
  python main.py --indent 2 "insert into t (a, b) values (1, 2)"

Configuration (.env or environment):
  SQL_FORMATTER_INDENT       default indentation width (4)
  SQL_FORMATTER_INDENT_TYPE  space | tab (space)
  SQL_FORMATTER_LOG_LEVEL    logging level (WARNING)
  SQL_FORMATTER_LOG_FILE     optional log file name
        """
    )

    parser.add_argument(
        'sql',
        help='SQL statement to format'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=None,
        help=f'Indentation width (default: {config.indent})'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )

    args = parser.parse_args()

    setup_logging(
        log_level='DEBUG' if args.verbose else config.log_level,
        log_file=config.log_file,
        use_colors=sys.stderr.isatty()
    )

    try:
        formatter = SqlFormatter(indent=args.indent)
        print(formatter.format(args.sql))
        return 0

    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Operation interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
