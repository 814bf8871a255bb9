#!/usr/bin/env python3
"""
Custom Bindings Example

This example extends the Firefox factory with a proxy binding and shows how
sessions are cached by configuration.

What This Example Demonstrates:
- Declaring a class-level binding with the binding() decorator
- Declaring an instance-level binding with configure()
- Fixing values with override()
- Inspecting resolved options without starting a browser
- Reusing one session for equal configurations

Running the Example:
    # From the project root; set REMOTE_URL to use a Selenium grid
    python examples/02_browsers/custom_bindings.py

Expected Output:
    The resolved Firefox preferences and arguments, then one "created browser"
    log line although the session is requested twice.
"""

import os
import pathlib
import sys
from typing import Any

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from mwselenium import Firefox
from mwselenium.log import LogConfig, LoggerFactory


class ProxiedFirefox(Firefox):
    """Firefox routing traffic through an HTTP proxy."""


@ProxiedFirefox.binding("browser_proxy_host", "browser_proxy_port")
def _proxy(host: str, port: Any, options: dict[str, Any]) -> None:
    caps = options["capabilities"]
    caps.set_preference("network.proxy.type", 1)
    caps.set_preference("network.proxy.http", host)
    caps.set_preference("network.proxy.http_port", int(port))


def main() -> int:
    lg = LoggerFactory.create_root(LogConfig.from_params("trace", colors=True))

    factory = ProxiedFirefox("firefox", lg)
    factory.configure(
        "browser_download_dir",
        callback=lambda path, options: options["capabilities"].set_preference(
            "browser.download.dir", path
        ),
    )
    factory.override(headless=True)
    if os.environ.get("REMOTE_URL"):
        factory.override(remote_url=os.environ["REMOTE_URL"])

    config = {
        "browser_language": "de",
        "browser_proxy_host": "127.0.0.1",
        "browser_proxy_port": "3128",
        "browser_download_dir": "/tmp/downloads",
    }

    options = factory.resolve(config)
    lg.info("resolved preferences", extra={"preferences": options["capabilities"].preferences})
    lg.info("resolved arguments", extra={"arguments": options["capabilities"].arguments})

    try:
        first = factory.instance_for(config)
        second = factory.instance_for(dict(config))
        lg.info("session reused", extra={"same": first is second})
    finally:
        factory.close_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())
