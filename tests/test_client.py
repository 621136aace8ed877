import asyncio

import pytest

from botlistspace import (
    Bot,
    Client,
    ClientOptions,
    HTTPClient,
    HTTPException,
    InvalidArgument,
    MalformedResponse,
    Pagination,
    Route,
    Statistics,
    Upvote,
    User,
)
from tests.fakes import bot_payload, make_response, make_session, upvote_payload, user_payload


def test_options_are_validated_eagerly():
    with pytest.raises(InvalidArgument):
        Client(123, "bot-token")
    with pytest.raises(InvalidArgument):
        Client("123", None)
    with pytest.raises(InvalidArgument):
        Client("123", "bot-token", user_token=5)


def test_options_are_immutable_and_hide_tokens():
    client = Client("123", "bot-token", user_token="user-token")

    assert client.options == ClientOptions(id="123", bot_token="bot-token", user_token="user-token")
    assert "bot-token" not in repr(client.options)
    with pytest.raises(AttributeError):
        client.options.id = "456"


def test_default_transport_uses_bot_token_and_base_url():
    client = Client("123", "bot-token", base_url="http://localhost/v1")

    assert isinstance(client.http, HTTPClient)
    assert client.http.token == "bot-token"
    assert client.http.base_url == "http://localhost/v1"


def test_get_statistics(client, http):
    http.request.return_value = {"bots": 10, "users": 20, "servers": 30}

    stats = asyncio.run(client.get_statistics())

    assert isinstance(stats, Statistics)
    assert stats.servers == 30
    http.request.assert_awaited_once_with(Route("GET", "/statistics"))


@pytest.mark.parametrize("page", [1, 2, 17])
def test_get_all_bots_sends_page(client, http, page):
    http.request.return_value = {"page": page, "limit": 2, "total": 40, "bots": [bot_payload("a"), bot_payload("b")]}

    bots = asyncio.run(client.get_all_bots(page))

    http.request.assert_awaited_once_with(Route("GET", "/bots"), params={"page": page})
    assert isinstance(bots, Pagination)
    assert bots.page == page
    assert bots.page_count == 20
    assert bots.key_array() == ["a", "b"]
    assert all(isinstance(bot, Bot) for bot in bots.array())


@pytest.mark.parametrize("page", [0, -1, "1", 1.0, None, True])
def test_get_all_bots_rejects_bad_page_before_any_request(client, http, page):
    with pytest.raises(InvalidArgument):
        client.get_all_bots(page)

    http.request.assert_not_called()


def test_get_bot(client, http):
    http.request.return_value = bot_payload("99")

    bot = asyncio.run(client.get_bot("99"))

    assert bot.id == "99"
    http.request.assert_awaited_once_with(Route("GET", "/bots/99"))


def test_get_bot_rejects_non_string_id(client, http):
    with pytest.raises(InvalidArgument):
        client.get_bot(99)

    http.request.assert_not_called()


def test_get_self_bot_matches_get_bot(client, http):
    http.request.return_value = bot_payload("123")

    asyncio.run(client.get_self_bot())
    asyncio.run(client.get_bot("123"))

    first, second = http.request.await_args_list
    assert first == second
    assert first.args == (Route("GET", "/bots/123"),)


def test_get_upvotes_is_authenticated_and_keyed_by_user(client, http):
    http.request.return_value = {"page": 1, "upvotes": [upvote_payload("7"), upvote_payload("8")]}

    upvotes = asyncio.run(client.get_upvotes())

    http.request.assert_awaited_once_with(Route("GET", "/bots/123/upvotes"), params={"page": 1}, auth=True)
    assert upvotes.key_array() == ["7", "8"]
    assert all(isinstance(upvote, Upvote) for upvote in upvotes.array())


def test_get_upvotes_rejects_bad_page(client, http):
    with pytest.raises(InvalidArgument):
        client.get_upvotes(0)

    http.request.assert_not_called()


@pytest.mark.parametrize("user_id, expected", [("7", True), ("8", True), ("9", False)])
def test_has_upvoted(client, http, user_id, expected):
    http.request.return_value = {"page": 1, "upvotes": [upvote_payload("7"), upvote_payload("8")]}

    assert asyncio.run(client.has_upvoted(user_id)) is expected
    http.request.assert_awaited_once_with(Route("GET", "/bots/123/upvotes"), params={"page": 1}, auth=True)


def test_has_upvoted_rejects_non_string_id(client, http):
    with pytest.raises(InvalidArgument):
        client.has_upvoted(7)

    http.request.assert_not_called()


def test_post_server_count(client, http):
    assert asyncio.run(client.post_server_count(5)) is None

    http.request.assert_awaited_once_with(Route("POST", "/bots/123"), json={"server_count": 5}, auth=True)


@pytest.mark.parametrize("shards", [[1, 2, 3], (1, 2, 3)])
def test_post_shard_counts(client, http, shards):
    asyncio.run(client.post_server_count(shards))

    http.request.assert_awaited_once_with(Route("POST", "/bots/123"), json={"shards": [1, 2, 3]}, auth=True)


@pytest.mark.parametrize("count", ["5", -1, 2.5, None, True, [1, "2"], [1, -2]])
def test_post_server_count_rejects_bad_counts(client, http, count):
    with pytest.raises(InvalidArgument):
        client.post_server_count(count)

    http.request.assert_not_called()


def test_get_user(client, http):
    http.request.return_value = user_payload("10")

    user = asyncio.run(client.get_user("10"))

    assert isinstance(user, User)
    assert user.tag == "owner10#0001"
    http.request.assert_awaited_once_with(Route("GET", "/users/10"))


def test_get_user_bots(client, http):
    http.request.return_value = {"page": 2, "pages": 2, "bots": [bot_payload("a")]}

    bots = asyncio.run(client.get_user_bots("10", 2))

    http.request.assert_awaited_once_with(Route("GET", "/users/10/bots"), params={"page": 2})
    assert bots.has("a")
    assert bots.has_next is False


@pytest.mark.parametrize("args", [(10,), ("10", 0), ("10", "2")])
def test_get_user_bots_rejects_bad_arguments(client, http, args):
    with pytest.raises(InvalidArgument):
        client.get_user_bots(*args)

    http.request.assert_not_called()


def test_transport_errors_propagate(client, http):
    http.request.side_effect = HTTPException(None, "connection refused")

    with pytest.raises(HTTPException):
        asyncio.run(client.get_statistics())

    assert http.request.await_count == 1


def test_malformed_page_raises(client, http):
    http.request.return_value = "<html>maintenance</html>"

    with pytest.raises(MalformedResponse):
        asyncio.run(client.get_all_bots())


def test_end_to_end_with_session():
    session = make_session(make_response(body=bot_payload("123", owners=[user_payload("1"), user_payload("2")])))

    async def run():
        async with Client("123", "bot-token", session=session) as client:
            return await client.get_self_bot()

    bot = asyncio.run(run())

    assert len(bot.owners.array()) == 2
    assert session.request.call_args.args == ("GET", "https://api.botlist.space/v1/bots/123")
    session.close.assert_not_called()


def test_authenticated_calls_send_bot_token_not_user_token():
    session = make_session(make_response(body={"page": 1, "upvotes": []}))
    client = Client("123", "bot-token", user_token="user-token", session=session)

    asyncio.run(client.get_upvotes())

    headers = session.request.call_args.kwargs["headers"]
    assert headers["Authorization"] == "bot-token"
    assert "user-token" not in headers.values()
