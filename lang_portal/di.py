import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from lang_portal.core import container
from lang_portal.database import DatabaseSession

T = TypeVar("T")

# The db override is container-wide; requests build their services one at a time.
_override_lock = threading.Lock()


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Binds the request-scoped database session into the container while the
    service graph is built.
    """

    def dependency(db: DatabaseSession) -> T:
        with _override_lock:
            try:
                container.db.override(db)
                return provider()
            finally:
                # Reset override once the service holds its own reference
                container.db.reset_override()

    return dependency
