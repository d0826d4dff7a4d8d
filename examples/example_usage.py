"""Example: use the service layer without Flask.

Controllers stay thin; the derivations live in the services, so a script can
build the container and read the same views the console serves.
"""

import importlib

from dotenv import load_dotenv

from hr_console.api.client import ApiClient
from hr_console.config import get_settings_module
from hr_console.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    client = ApiClient(settings.API_BASE_URL, token_provider=lambda: settings.API_TOKEN or None)
    container = build_container(client=client, default_target_days=settings.DEFAULT_TARGET_DAYS)

    state = container.expiry_service.load_watchlist()
    if state.error:
        print(f"watchlist unavailable: {state.error}")
        return
    for entry in state.data.entries[:5]:
        print(entry.name, entry.end_date, entry.status.value, entry.days_until_expiry)


if __name__ == "__main__":
    main()
