from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from admissions.application.use_cases.application_form_store import ApplicationFormStore

_current_store: ContextVar[ApplicationFormStore | None] = ContextVar("application_form_store", default=None)


@contextmanager
def application_form_provider(store: ApplicationFormStore) -> Iterator[ApplicationFormStore]:
    """Bind one store for everything running inside the block."""
    token = _current_store.set(store)
    try:
        yield store
    finally:
        _current_store.reset(token)


def use_application_form() -> ApplicationFormStore:
    store = _current_store.get()
    if store is None:
        raise RuntimeError("use_application_form must be used within application_form_provider")
    return store
