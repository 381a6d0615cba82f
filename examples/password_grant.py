import contextlib
import os
import sys

# Add src to path for running directly
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

import anyio

from coreason_grant.client import PasswordGrantClientAsync
from coreason_grant.config import CoreasonGrantConfig
from coreason_grant.models import TokenSuccess


async def main() -> None:
    """
    Requests a token with the password grant against a local authorization server.

    The client id and secret are read from COREASON_GRANT_CLIENT_ID / COREASON_GRANT_CLIENT_SECRET
    when set; the endpoints below point at a local development server.
    """
    print(">>> Starting Password Grant Example")

    config = CoreasonGrantConfig(
        authorize_url="http://localhost:8080/oauth/authorize",
        token_url="http://localhost:8080/oauth/token",
        scope="openid profile",
        http_timeout=5.0,
        unsafe_local_dev=True,  # Plain http for localhost only
    )

    async with PasswordGrantClientAsync(config) as client:
        controller = client.controller(
            os.environ.get("EXAMPLE_USERNAME", "alice"), os.environ.get("EXAMPLE_PASSWORD", "p@ss")
        )

        def on_complete(payload: dict | None, error: Exception | None) -> None:
            print(f">>> Completed. token obtained={error is None}, error={error!r}")

        result = await controller.authorize(on_complete=on_complete)

        if isinstance(result, TokenSuccess):
            print(f">>> Token type: {result.token().token_type}")
        else:
            # Without a running server this is a transport error
            print(f">>> Failure kind: {result.kind} ({result.message})")


if __name__ == "__main__":
    with contextlib.suppress(KeyboardInterrupt):
        anyio.run(main)
