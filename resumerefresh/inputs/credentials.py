"""Account secrets read from the environment."""

from __future__ import annotations

import os
from typing import Mapping

from resumerefresh import config
from resumerefresh.core.errors import MissingCredentialsError
from resumerefresh.core.types import Credentials


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """
    Read the account identifier and secret.

    Raises MissingCredentialsError naming every unset variable.
    """
    environ = os.environ if environ is None else environ
    username = environ.get(config.USERNAME_ENV, "").strip()
    password = environ.get(config.PASSWORD_ENV, "")

    missing = [
        name
        for name, value in ((config.USERNAME_ENV, username), (config.PASSWORD_ENV, password))
        if not value
    ]
    if missing:
        raise MissingCredentialsError(
            f"Environment variables {' and '.join(missing)} must be set"
        )
    return Credentials(username=username, password=password)
