"""List the accounts of the user whose token is in AKAHU_USER_TOKEN.

    AKAHU_APP_TOKEN=... AKAHU_APP_SECRET=... AKAHU_USER_TOKEN=... python examples/list_accounts.py
"""
import logging
import sys

from akahu import AkahuClient, AkahuError, Settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("akahu.examples.list_accounts")


def main() -> int:
    settings = Settings()
    if not settings.user_access_token:
        logger.error("AKAHU_USER_TOKEN is not set.")
        return 1

    with AkahuClient.from_settings(settings) as client:
        try:
            result = client.accounts.list(settings.user_access_token).raise_for_error()
        except AkahuError as exc:
            logger.error("Listing accounts failed: %s", exc)
            return 1

    print(f"Response status: {result.status_code}")
    for index, account in enumerate(result.data or [], start=1):
        print(f"{index}: {account.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
