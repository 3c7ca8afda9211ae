"""Transient administrator authentication flag."""

from __future__ import annotations

import logging
from typing import Optional

from infrastructure.constants import ADMIN_PASSWORD


class AdminSession:
    """Track whether the current actor has entered the admin password.

    State lives in memory only; a new session always starts unauthenticated.
    """

    def __init__(
        self,
        password: str = ADMIN_PASSWORD,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._password = password
        self._authenticated = False
        self._logger = logger or logging.getLogger('AdminSession')

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def login(self, password: Optional[str]) -> bool:
        """Compare ``password`` with the configured credential."""

        if password is not None and password == self._password:
            self._authenticated = True
            self._logger.info("Admin session authenticated")
            return True

        self._logger.warning("Rejected admin login attempt")
        return False

    def logout(self) -> None:
        if self._authenticated:
            self._logger.info("Admin session logged out")
        self._authenticated = False
