"""Session provider: the identity of the current request."""

import time
from typing import Any, MutableMapping, Optional

from constants import Limits
from core.exceptions import AuthenticationError
from core.logger import logger
from database.backend import Backend
from models.profile_models import Identity

SESSION_KEY = "identity"


class SessionProvider:
    """
    Tracks the signed-in identity for one request.

    The provider is built at the start of a request from the session store
    (the Flask session cookie) and handed to the pages explicitly. Signing out
    tears the stored identity down.
    """

    def __init__(self, backend: Backend, store: MutableMapping[str, Any]):
        self.backend = backend
        self.store = store
        self._identity: Optional[Identity] = None
        raw = store.get(SESSION_KEY)
        if raw:
            try:
                self._identity = Identity.model_validate(raw)
            except ValueError:
                logger.warning("Discarding malformed identity from session store")
                store.pop(SESSION_KEY, None)

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    def refresh_if_expired(self, now: Optional[float] = None) -> None:
        """
        Renew the stored tokens shortly before the access token expires.

        An identity whose session cannot be renewed is forgotten, so the
        pages ask the user to sign in again.
        """
        identity = self._identity
        if identity is None or identity.expires_at is None:
            return
        now = time.time() if now is None else now
        if now < identity.expires_at - Limits.SESSION_REFRESH_MARGIN:
            return
        try:
            self._remember(self.backend.refresh_session(identity))
        except AuthenticationError as e:
            logger.warning(f"Could not refresh session for {identity.email}: {str(e)}")
            self.forget()
            return
        logger.debug(f"Refreshed session for {identity.email}")

    def forget(self) -> None:
        """Drop the stored identity without contacting the backend."""
        self._identity = None
        self.store.pop(SESSION_KEY, None)

    def _remember(self, identity: Identity) -> Identity:
        self._identity = identity
        self.store[SESSION_KEY] = identity.model_dump(mode="json")
        return identity

    def sign_in(self, email: str, password: str) -> Identity:
        """Authenticate and store the identity. Raises AuthenticationError."""
        identity = self.backend.sign_in(email, password)
        logger.info(f"Signed in: {identity.email}")
        return self._remember(identity)

    def sign_up(
        self, email: str, password: str, full_name: Optional[str] = None, is_freelancer: bool = False
    ) -> Identity:
        """Register, then store the new identity. Raises AuthenticationError."""
        identity = self.backend.sign_up(
            email, password, full_name=full_name, is_freelancer=is_freelancer
        )
        logger.info(f"Signed up: {identity.email}")
        return self._remember(identity)

    def sign_out(self) -> None:
        if self._identity is not None:
            logger.info(f"Signed out: {self._identity.email}")
        self.backend.sign_out()
        self.forget()
