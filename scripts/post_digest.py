"""
Daily calendar digest entry point.
Run this file once a day (cron, systemd timer, Task Scheduler...) to post
today's events to the configured webhooks.
Make sure you have run 'python scripts/setup.py' at least once.

Usage:
    python scripts/post_digest.py [--date YYYY-MM-DD] [--dry-run]
"""

import argparse
import datetime
import sys
import time
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.exceptions import ConfigurationError
from src.core.orchestrator import OrchestratorFactory
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Post a day's calendar events to Discord webhooks.")
    parser.add_argument(
        "--date",
        type=datetime.date.fromisoformat,
        default=None,
        help="Day to post (YYYY-MM-DD). Defaults to today in the configured timezone."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the webhook payloads instead of posting them."
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main execution function.

    Delivery failures are logged but do not change the exit code; only
    configuration and authentication problems return 1.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)
    start_time = time.time()

    logger.info("="*60)
    logger.info("Starting Calendar Digest Poster")
    logger.info("="*60)

    try:
        orchestrator = OrchestratorFactory.create(dry_run=args.dry_run)
        orchestrator.run_daily_digest(args.date)
        return 0

    except ConfigurationError as e:
        logger.error("Configuration validation failed")
        logger.error(str(e))
        logger.error("Please run 'python scripts/setup.py' to configure the application")
        return 1

    except FileNotFoundError as e:
        logger.error("Missing required file", exc_info=True)
        logger.error(f"Could not find: {e.filename}")
        return 1

    except ConnectionError as e:
        logger.error("Authentication failed", exc_info=True)
        logger.error(str(e))
        return 1

    except KeyboardInterrupt:
        logger.warning("Digest run interrupted by user")
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.info(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
