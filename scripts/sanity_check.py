"""Minimal sanity checks against a live DeSo node."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from deso_api import default_client  # noqa: E402
from deso_api.logs import configure_logging  # noqa: E402

# Override via env to look up a different profile.
SAMPLE_USERNAME = os.getenv("DESO_SAMPLE_USERNAME", "diamondhands")
# Opt-in to the heavier holders lookup.
RUN_HOLDERS = os.getenv("RUN_HOLDERS_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    configure_logging()
    try:
        print("Exchange rate:", await default_client.get_exchange_rate())
        print("App state:", await default_client.get_app_state())

        profile = await default_client.get_single_profile(username=SAMPLE_USERNAME)
        print("Profile:", profile)

        public_key = None
        if isinstance(profile, dict) and isinstance(profile.get("Profile"), dict):
            public_key = profile["Profile"].get("PublicKeyBase58Check")
        if public_key:
            print("Derived keys:", await default_client.get_user_derived_keys(public_key_base58_check=public_key))
            if RUN_HOLDERS:
                print(
                    "Holders (limit 3):",
                    await default_client.get_holders_for_public_key(public_key=public_key, num_to_fetch=3),
                )
    finally:
        await default_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
