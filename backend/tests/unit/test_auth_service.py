"""Unit tests for the AuthService: email sign-in and the explicit session."""

import asyncio
import json

import pytest

from avocado.domain.entities import Role
from avocado.domain.exceptions import InvalidInputError
from tests.unit.fakes import make_context


@pytest.mark.asyncio
async def test_first_login_registers_user():
    ctx, store, _ = make_context()

    user = await ctx.auth.login("jane@avocado.com")

    assert user.name == "jane"
    assert user.email == "jane@avocado.com"
    assert user.role is Role.ADMIN
    assert user.avatar == "https://ui-avatars.com/api/?name=jane&background=059669&color=fff"
    assert len(json.loads(store.data["avocado_users"])) == 1


@pytest.mark.asyncio
async def test_login_twice_reuses_id():
    ctx, store, _ = make_context()

    first = await ctx.auth.login("jane@avocado.com")
    second = await ctx.auth.login("jane@avocado.com")

    assert first.id == second.id
    assert len(json.loads(store.data["avocado_users"])) == 1


@pytest.mark.asyncio
async def test_role_is_recomputed_on_every_login():
    ctx, store, _ = make_context()
    user = await ctx.auth.login("Client.Bob@avocado.com")
    assert user.role is Role.CLIENT

    # Tamper with the stored role; the next login derives it from the email again.
    users = json.loads(store.data["avocado_users"])
    users[0]["role"] = "ADMIN"
    store.data["avocado_users"] = json.dumps(users)

    again = await ctx.auth.login("Client.Bob@avocado.com")
    assert again.id == user.id
    assert again.role is Role.CLIENT
    assert json.loads(store.data["avocado_users"])[0]["role"] == "CLIENT"


@pytest.mark.asyncio
async def test_gathered_first_logins_register_one_user():
    ctx, store, _ = make_context()

    first, second = await asyncio.gather(
        ctx.auth.login("x@avocado.com"),
        ctx.auth.login("x@avocado.com"),
    )

    assert first.id == second.id
    assert len(json.loads(store.data["avocado_users"])) == 1


@pytest.mark.asyncio
async def test_login_trims_surrounding_whitespace():
    ctx, store, _ = make_context()

    padded = await ctx.auth.login("  jane@avocado.com\n")
    plain = await ctx.auth.login("jane@avocado.com")

    assert padded.id == plain.id
    assert padded.email == "jane@avocado.com"
    assert len(json.loads(store.data["avocado_users"])) == 1


@pytest.mark.asyncio
async def test_login_persists_and_sets_session():
    ctx, store, _ = make_context()

    user = await ctx.auth.login("jane@avocado.com")

    assert ctx.auth.current_user() == user
    assert ctx.session.is_authenticated
    assert json.loads(store.data["avocado_current_user"])["id"] == user.id


@pytest.mark.asyncio
async def test_logout_clears_session_and_record():
    ctx, store, _ = make_context()
    await ctx.auth.login("jane@avocado.com")

    await ctx.auth.logout()

    assert ctx.auth.current_user() is None
    assert "avocado_current_user" not in store.data


@pytest.mark.asyncio
async def test_restore_session_reads_persisted_user():
    ctx, store, _ = make_context()
    user = await ctx.auth.login("jane@avocado.com")
    ctx.session.end()

    restored = await ctx.auth.restore_session()

    assert restored == user
    assert ctx.auth.current_user() == user


@pytest.mark.asyncio
async def test_restore_session_without_record_returns_none():
    ctx, _, _ = make_context()
    assert await ctx.auth.restore_session() is None
    assert ctx.auth.current_user() is None


@pytest.mark.asyncio
async def test_blank_email_is_rejected_without_delay():
    ctx, _, sleep = make_context()

    with pytest.raises(InvalidInputError):
        await ctx.auth.login("   ")

    assert sleep.delays == []


@pytest.mark.asyncio
async def test_login_and_logout_latency():
    ctx, _, sleep = make_context()

    await ctx.auth.login("jane@avocado.com")
    await ctx.auth.logout()

    assert sleep.delays == [0.6, 0.2]
