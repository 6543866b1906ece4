# yorkrealty/client/gate.py
"""
Client-side access gate.

Access to the create-listing and property-detail pages is decided by a flag
the browser keeps in session storage after a successful /login. Nothing here
is verified by the server; anyone can set the flag.

Part of the client library; the API does not import it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, MutableMapping, Optional
from urllib.parse import urlparse

LOGIN_PAGE = "login.html"
HOME_PAGE = "index.html"

PROTECTED_PAGES = {
    "create-listing.html": "You need to log in to create a listing!",
    "property-detail.html": "You need to log in to view property details.",
}

IS_LOGGED_IN = "isLoggedIn"
USER_NAME = "userName"
USER_EMAIL = "userEmail"
REDIRECT_AFTER_LOGIN = "redirectAfterLogin"


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    redirect_to: Optional[str] = None
    message: Optional[str] = None


class AccessGate:
    def __init__(self, storage: Optional[MutableMapping[str, str]] = None):
        self.storage: MutableMapping[str, str] = storage if storage is not None else {}

    def is_logged_in(self) -> bool:
        return self.storage.get(IS_LOGGED_IN) == "true"

    def record_login(self, user: Mapping[str, Any]) -> None:
        self.storage[IS_LOGGED_IN] = "true"
        self.storage[USER_NAME] = str(user.get("full_name", ""))
        self.storage[USER_EMAIL] = str(user.get("email", ""))

    def logout(self) -> None:
        self.storage.clear()

    def guard(self, page_url: str) -> GateDecision:
        page = urlparse(page_url).path.rsplit("/", 1)[-1]
        message = PROTECTED_PAGES.get(page)
        if message is None or self.is_logged_in():
            return GateDecision(allowed=True)
        self.storage[REDIRECT_AFTER_LOGIN] = page_url
        return GateDecision(allowed=False, redirect_to=LOGIN_PAGE, message=message)

    def post_login_target(self) -> str:
        return self.storage.pop(REDIRECT_AFTER_LOGIN, None) or HOME_PAGE

    def navbar_state(self) -> Dict[str, bool]:
        logged_in = self.is_logged_in()
        return {"logout": logged_in, "login": not logged_in, "register": not logged_in}
