#!/usr/bin/env python3
"""
Visit Wiki Example

This example loads an environment from examples/environments.yml, opens the
configured browser on the wiki's login page and logs in as the configured
(or provisioned) user.

What This Example Demonstrates:
- Loading a named environment
- Logging configured from the environment's ``logging`` section
- Getting a browser session from the environment
- Using credentials, including an alternative account

Running the Example:
    # From the project root, with a wiki on 127.0.0.1:8080 and geckodriver on PATH
    python examples/01_basics/visit_wiki.py

    # Against the beta cluster, creating accounts on first use
    MEDIAWIKI_ENVIRONMENT=beta python examples/01_basics/visit_wiki.py

Expected Output:
    Log lines for the created browser and, with user_factory, the created
    account, followed by the title of the page shown after logging in.
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from selenium.webdriver.common.by import By

from mwselenium import Environment, FixtureError


def log_in(env: Environment) -> str:
    """Log in through Special:UserLogin and return the resulting page title."""
    browser = env.visit_wiki("Special:UserLogin")
    browser.find_element(By.ID, "wpName1").send_keys(env.user())
    browser.find_element(By.ID, "wpPassword1").send_keys(env.password())
    browser.find_element(By.ID, "wpLoginAttempt").click()
    return browser.title


def main() -> int:
    path = pathlib.Path(__file__).resolve().parents[1] / "environments.yml"
    env = Environment.load(path=path)

    try:
        with env:
            env.lg.info("logged in", extra={"title": log_in(env), "user": env.user()})
    except FixtureError as e:
        env.lg.error("example failed", extra={"exception": e})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
