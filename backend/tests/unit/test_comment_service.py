"""Unit tests for the CommentService."""

import json

import pytest

from avocado.domain.exceptions import InvalidInputError, PermissionDeniedError
from tests.unit.fakes import make_context


@pytest.mark.asyncio
async def test_add_then_list_returns_new_comment():
    ctx, _, _ = make_context()
    author = await ctx.auth.login("admin@avocado.com")

    comment = await ctx.comments.add_comment("t1", author, "Kick-off on Monday")

    assert comment.task_id == "t1"
    assert comment.user_id == author.id
    assert comment.user_name == author.name
    assert comment.user_avatar == author.avatar
    assert await ctx.comments.list_comments("t1") == [comment]


@pytest.mark.asyncio
async def test_comments_of_other_tasks_are_unaffected():
    ctx, _, _ = make_context()
    author = await ctx.auth.login("admin@avocado.com")
    other = await ctx.comments.add_comment("t2", author, "Different task")

    await ctx.comments.add_comment("t1", author, "first")
    await ctx.comments.add_comment("t1", author, "second")

    assert await ctx.comments.list_comments("t2") == [other]
    assert [c.content for c in await ctx.comments.list_comments("t1")] == ["first", "second"]


@pytest.mark.asyncio
async def test_client_can_comment():
    ctx, _, _ = make_context()
    client = await ctx.auth.login("client@avocado.com")

    comment = await ctx.comments.add_comment("t1", client, "When is this due?")

    assert comment.user_name == "client"


@pytest.mark.asyncio
async def test_cannot_comment_as_another_user():
    ctx, store, sleep = make_context()
    admin = await ctx.auth.login("admin@avocado.com")
    await ctx.auth.login("client@avocado.com")
    sleep.delays.clear()

    with pytest.raises(PermissionDeniedError) as exc_info:
        await ctx.comments.add_comment("t1", admin, "Approved!")

    assert exc_info.value.role == "CLIENT"
    assert json.loads(store.data.get("avocado_comments", "[]")) == []
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_anonymous_cannot_comment():
    ctx, _, _ = make_context()
    author = await ctx.auth.login("admin@avocado.com")
    await ctx.auth.logout()

    with pytest.raises(PermissionDeniedError):
        await ctx.comments.add_comment("t1", author, "hello")


@pytest.mark.asyncio
async def test_blank_comment_is_rejected():
    ctx, _, _ = make_context()
    author = await ctx.auth.login("admin@avocado.com")

    with pytest.raises(InvalidInputError):
        await ctx.comments.add_comment("t1", author, "  \n")

    assert await ctx.comments.list_comments("t1") == []


@pytest.mark.asyncio
async def test_comment_operation_latency():
    ctx, _, sleep = make_context()
    author = await ctx.auth.login("admin@avocado.com")
    sleep.delays.clear()

    await ctx.comments.add_comment("t1", author, "hi")
    await ctx.comments.list_comments("t1")

    assert sleep.delays == [0.3, 0.3]
