"""
Locally persisted admin session.

Two keys live in the client storage: `admin_token` (opaque string) and
`admin_user` (JSON record of the admin). Anything that cannot be read back
is treated as no session and purged.
"""
import json
from dataclasses import dataclass, asdict
from typing import Optional

TOKEN_KEY = "admin_token"
USER_KEY = "admin_user"

_USER_FIELDS = ("id", "name", "email", "restaurant_id", "restaurant_name")


@dataclass(frozen=True)
class AdminSession:
    token: str
    id: str
    name: str
    email: str
    restaurant_id: str
    restaurant_name: str

    def user_record(self) -> dict:
        record = asdict(self)
        record.pop("token")
        return record


class SessionStore:
    """
    Wraps a key-value backend with get/set/remove, e.g. `page.client_storage`.
    """

    def __init__(self, storage):
        self.storage = storage

    def save(self, token: str, user: dict) -> AdminSession:
        session = _build_session(token, user)
        self.storage.set(TOKEN_KEY, token)
        self.storage.set(USER_KEY, json.dumps(session.user_record()))
        return session

    def load(self) -> Optional[AdminSession]:
        token = self.storage.get(TOKEN_KEY)
        raw_user = self.storage.get(USER_KEY)
        if not token or not raw_user:
            return None
        try:
            user = json.loads(raw_user) if isinstance(raw_user, str) else raw_user
            return _build_session(token, user)
        except (ValueError, TypeError, KeyError) as ex:
            print(f"⚠️ Discarding unreadable admin session: {ex}")
            self.clear()
            return None

    def clear(self):
        for key in (TOKEN_KEY, USER_KEY):
            try:
                self.storage.remove(key)
            except KeyError:
                pass


def _build_session(token, user) -> AdminSession:
    if not isinstance(token, str) or not token:
        raise ValueError("Session token must be a non-empty string")
    if not isinstance(user, dict):
        raise TypeError("Admin record must be an object")
    missing = [f for f in _USER_FIELDS if user.get(f) in (None, "")]
    if missing:
        raise KeyError(f"Admin record is missing: {', '.join(missing)}")
    return AdminSession(token=token, **{f: str(user[f]) for f in _USER_FIELDS})
