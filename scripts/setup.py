"""
One-time setup for the calendar digest poster.

Authenticates with Google, lists the calendars the account can read and
writes config/config.json. Run from a machine with a browser.
"""

import json
import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.auth.google_auth import create_initial_token, get_calendar_service
from src.core.config_manager import Config
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def list_calendars(calendar_service) -> list:
    """
    Print the calendars this account owns or is subscribed to.

    Returns:
        List of (calendar_id, summary) tuples
    """
    calendars = []
    try:
        page_token = None
        while True:
            result = calendar_service.calendarList().list(pageToken=page_token).execute()
            for entry in result.get('items', []):
                calendars.append((entry['id'], entry.get('summary', entry['id'])))
            page_token = result.get('nextPageToken')
            if not page_token:
                break
    except Exception as e:
        print(f"Could not list calendars: {e}")
        return []

    for index, (calendar_id, summary) in enumerate(calendars, start=1):
        print(f"  {index:2d}. {summary} <{calendar_id}>")
    return calendars


def prompt_list(prompt: str) -> list:
    """Ask for a comma separated list."""
    raw = input(prompt).strip()
    return [item.strip() for item in raw.split(',') if item.strip()]


def write_config_file(calendars: list) -> bool:
    """
    Interactively create config/config.json.

    Returns:
        True if the file was written
    """
    if Config.CONFIG_FILE.exists():
        print(f"✓ Existing config found at {Config.CONFIG_FILE}")
        return True

    choices = prompt_list("Calendar numbers or IDs to post (comma separated): ")
    calendar_ids = []
    for choice in choices:
        if choice.isdigit() and 1 <= int(choice) <= len(calendars):
            calendar_ids.append(calendars[int(choice) - 1][0])
        else:
            calendar_ids.append(choice)

    webhooks = prompt_list("Discord webhook URLs (comma separated): ")
    title = input("Digest title (e.g. 'The First Regiment Calendar'): ").strip()
    public_url = input("Public calendar URL (optional): ").strip()
    timezone = input(f"Timezone [{Config.TARGET_TIMEZONE}]: ").strip() or Config.TARGET_TIMEZONE

    data = {
        'calendars': calendar_ids,
        'webhooks': webhooks,
        'title': title,
        'public_url': public_url,
        'timezone': timezone
    }

    try:
        Config.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        Config.CONFIG_FILE.write_text(json.dumps(data, indent=2) + "\n", encoding='utf-8')
        print(f"Config written to {Config.CONFIG_FILE}")
        return True
    except OSError as e:
        print(f"Failed to write config: {e}")
        return False


def main() -> None:
    """Main setup wizard."""
    print("Setting up Calendar Digest Poster...")
    print("="*60)
    logger.info("Starting setup wizard")

    # Step 1: Google Authentication
    print("\nStep 1: Google Cloud Authentication")
    if not Config.TOKEN_FILE.exists():
        if not create_initial_token():
            print("Google authentication failed.")
            sys.exit(1)
    else:
        print("Existing token.json found")

    # Step 2: Calendars
    print("\nStep 2: Available Calendars")
    calendar_service = get_calendar_service()
    calendars = list_calendars(calendar_service) if calendar_service else []

    # Step 3: Config file
    print("\nStep 3: Digest Configuration")
    write_config_file(calendars)

    # Final verification
    print("\nStep 4: Verification")
    if Config.validate():
        logger.info("Setup completed successfully")
        print("="*60)
        print("Setup complete!")
        print("="*60)
        print("\nTry a dry run: python scripts/post_digest.py --dry-run")
        print("Then schedule 'python scripts/post_digest.py' to run once a day.")
    else:
        print("="*60)
        print("Setup completed with some warnings")
        print("="*60)
        print("\nPlease check the logs and fix any missing configuration")


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        print("\nSetup cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nUnexpected error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
