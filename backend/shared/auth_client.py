"""
Process-wide Supabase auth client.

The auth client keeps a session in its storage and, with auto refresh
enabled, runs a background refresh timer. Two instances in one process
would each run their own timer against the same storage keys, so exactly
one is built here, at the application entry point, and handed to every
consumer through the service container.
"""

import logging
import threading
from typing import Any, Callable, Optional

from supabase import Client, ClientOptions, create_client

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

# Substrings identifying auth session keys, whatever library wrote them
SESSION_KEY_MARKERS = ("supabase.auth", "gotrue")


class AuthClientLockedError(RuntimeError):
    """Raised when a locked registry is asked to drop its client."""


class SessionStore:
    """
    In-process session storage for the auth client.

    Implements the get_item/set_item/remove_item protocol the Supabase auth
    client uses for persistence. Every key is namespaced with the storage
    key (aicurator_auth_<env>), so sessions from different environments
    never collide.
    """

    def __init__(self, storage_key: str) -> None:
        self.storage_key = storage_key
        self._items: dict[str, str] = {}
        self._lock = threading.Lock()

    def _key(self, key: str) -> str:
        return f"{self.storage_key}:{key}"

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(self._key(key))

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[self._key(key)] = value

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._items.pop(self._key(key), None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._items)

    def purge(self) -> list[str]:
        """Remove every auth session key. Returns the removed keys."""
        markers = SESSION_KEY_MARKERS + (self.storage_key,)
        with self._lock:
            removed = [k for k in self._items if any(m in k for m in markers)]
            for key in removed:
                del self._items[key]
        for key in removed:
            logger.debug("Removed auth storage key %s", key)
        return removed


ClientFactory = Callable[[str, str, ClientOptions], Client]


def _default_factory(url: str, key: str, options: ClientOptions) -> Client:
    return create_client(url, key, options=options)


class AuthClientRegistry:
    """
    Holder of the single auth client for this process.

    get() builds the client on first use under a lock (double-checked), so
    concurrent first callers still end up with one instance. lock() marks
    the instance as final: after that reset() is refused, which keeps late
    code paths (a dev reload, a stray import) from re-creating it.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        factory: Optional[ClientFactory] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._factory = factory or _default_factory
        self._client: Optional[Client] = None
        self._mutex = threading.Lock()
        self._locked = False
        self.instances_created = 0
        self.storage = SessionStore(self.storage_key)

    @property
    def storage_key(self) -> str:
        return f"aicurator_auth_{self._settings.env_prefix}"

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    @property
    def locked(self) -> bool:
        return self._locked

    def get(self, **options: Any) -> Client:
        """
        Return the auth client, building it on first call.

        Keyword options are merged into the ClientOptions used for the
        first construction only; storage and persist_session are fixed.
        """
        client = self._client
        if client is not None:
            return client

        with self._mutex:
            if self._client is None:
                self._client = self._build(options)
            return self._client

    def _build(self, options: dict[str, Any]) -> Client:
        settings = self._settings
        if not settings.supabase_url or not settings.supabase_anon_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
            )

        options.setdefault("auto_refresh_token", settings.auth_auto_refresh)
        options.update(persist_session=True, storage=self.storage)

        logger.debug("Creating auth client (storage key %s)", self.storage_key)
        client = self._factory(
            settings.supabase_url,
            settings.supabase_anon_key,
            ClientOptions(**options),
        )
        self.instances_created += 1
        return client

    def lock(self) -> Client:
        """Build the client if needed and forbid any later reset."""
        client = self.get()
        self._locked = True
        logger.debug("Auth client locked")
        return client

    def unlock(self) -> None:
        self._locked = False

    def reset(self) -> None:
        """
        Drop the client and purge persisted session keys.

        Raises:
            AuthClientLockedError: If the registry has been locked
        """
        if self._locked:
            raise AuthClientLockedError("Auth client is locked and cannot be reset")

        with self._mutex:
            self._client = None
        self.storage.purge()
        logger.debug("Auth client reset")


# Module-level registry singleton
_registry: Optional[AuthClientRegistry] = None
_registry_lock = threading.Lock()


def get_auth_client_registry() -> AuthClientRegistry:
    """Get the process-wide auth client registry."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = AuthClientRegistry()
    return _registry


def get_auth_client() -> Client:
    """Shortcut for get_auth_client_registry().get()."""
    return get_auth_client_registry().get()


def reset_auth_client_registry() -> None:
    """
    Forget the registry entirely (testing only).

    Unlike AuthClientRegistry.reset() this ignores the lock.
    """
    global _registry
    with _registry_lock:
        _registry = None
