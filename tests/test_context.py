from __future__ import annotations

import asyncio

import pytest

from admissions.wiring.context import application_form_provider, use_application_form


def test_use_outside_provider_fails():
    with pytest.raises(RuntimeError, match="must be used within application_form_provider"):
        use_application_form()


def test_provider_binds_store(store):
    with application_form_provider(store):
        assert use_application_form() is store
    with pytest.raises(RuntimeError):
        use_application_form()


def test_nested_providers_restore_outer(store, store_factory):
    inner = store_factory()
    with application_form_provider(store):
        with application_form_provider(inner):
            assert use_application_form() is inner
        assert use_application_form() is store


def test_provider_visible_to_tasks(store):
    async def read():
        return use_application_form()

    with application_form_provider(store):
        assert asyncio.run(read()) is store
