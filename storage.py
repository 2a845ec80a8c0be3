"""Per-pilot high scores, achievements and user list, kept in one JSON file."""

import copy
import json
import logging
from typing import Any, Iterable, Optional

import config

LOG = logging.getLogger(__name__)


def _empty_document() -> dict[str, Any]:
    return {"current_user": None, "users": [], "high_scores": {}, "achievements": {}}


def _user_key(username: str) -> str:
    return str(username).strip().upper()


class PersistenceStore:
    """Key-value persistence for pilots.

    Everything lives in one document that is read once and written back on
    every change. A path of None keeps the data in memory only, and any I/O
    failure while saving degrades to the same behaviour.
    """

    def __init__(self, path: Optional[str] = config.SAVE_FILE):
        self.path = path
        self._data = self._load()

    # ------------------------------------------------------------------
    # Document I/O
    # ------------------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        data = _empty_document()
        if not self.path:
            return data
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except FileNotFoundError:
            LOG.debug("No save file at %s", self.path)
            return data
        except (json.JSONDecodeError, OSError) as exc:
            LOG.warning("Could not read save file %s: %s", self.path, exc)
            return data

        if not isinstance(stored, dict):
            LOG.warning("Ignoring malformed save file %s", self.path)
            return data
        for key, default in data.items():
            value = stored.get(key, default)
            if isinstance(default, (list, dict)) and not isinstance(value, type(default)):
                value = default
            data[key] = value
        return data

    def _save(self) -> None:
        if not self.path:
            return
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except OSError as exc:
            LOG.warning("Could not write save file %s, keeping data in memory: %s", self.path, exc)
            self.path = None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def get_current_user(self) -> Optional[str]:
        user = self._data.get("current_user")
        if isinstance(user, str) and user.strip():
            return user
        return None

    def set_current_user(self, username: Optional[str]) -> None:
        """Remember the active pilot; a blank name clears it."""
        name = str(username).strip() if username else ""
        if name:
            self._data["current_user"] = name
            self._add_user(name)
            LOG.info("Current pilot set to %s", name)
        else:
            self._data["current_user"] = None
            LOG.info("Current pilot cleared")
        self._save()

    def _add_user(self, username: str) -> None:
        users = self._data["users"]
        if _user_key(username) not in (_user_key(u) for u in users):
            users.append(username)

    def all_usernames(self) -> list[str]:
        return list(self._data["users"])

    # ------------------------------------------------------------------
    # High scores
    # ------------------------------------------------------------------

    def load_high_scores(self, username: Optional[str] = None) -> list[dict]:
        """Return one pilot's table, or with no name the combined table of every known pilot."""
        if username:
            entries = self._data["high_scores"].get(_user_key(username), [])
            return [dict(e) for e in entries if isinstance(e, dict)]

        combined = []
        for user in self.all_usernames():
            for entry in self.load_high_scores(user):
                entry["user"] = user
                combined.append(entry)
        combined.sort(key=lambda e: int(e.get("score", 0)), reverse=True)
        return combined

    def save_high_scores(self, username: str, entries: Iterable[dict]) -> None:
        if not username:
            LOG.debug("No pilot; high scores not saved")
            return
        self._data["high_scores"][_user_key(username)] = copy.deepcopy(list(entries))
        self._save()

    # ------------------------------------------------------------------
    # Achievements
    # ------------------------------------------------------------------

    def load_achievements(self, username: Optional[str]) -> set[str]:
        if not username:
            return set()
        ids = self._data["achievements"].get(_user_key(username), [])
        return {str(i) for i in ids}

    def save_achievements(self, username: str, ids: Iterable[str]) -> None:
        if not username:
            LOG.debug("No pilot; achievements not saved")
            return
        self._data["achievements"][_user_key(username)] = sorted(ids)
        self._save()

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset_user_data(self, username: str) -> None:
        """Forget a pilot's scores, achievements and name."""
        if not username:
            return
        key = _user_key(username)
        self._data["high_scores"].pop(key, None)
        self._data["achievements"].pop(key, None)
        self._data["users"] = [u for u in self._data["users"] if _user_key(u) != key]
        current = self.get_current_user()
        if current and _user_key(current) == key:
            self._data["current_user"] = None
        LOG.info("Reset data for pilot %s", username)
        self._save()
