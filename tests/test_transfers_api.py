"""Transfer API tests.

Learn: Only the debited account is ownership-checked. Alice may pay into
Bob's account, but she can never pull money out of it.
"""

import pytest


@pytest.fixture()
def accounts(store, make_user):
    """Alice and Bob each with a funded USD account; Alice also holds EUR."""
    make_user("alice")
    make_user("bob")
    return {
        "alice_usd": store.create_account(owner="alice", currency="USD", balance=100),
        "alice_eur": store.create_account(owner="alice", currency="EUR", balance=100),
        "bob_usd": store.create_account(owner="bob", currency="USD", balance=100),
    }


def _transfer(from_id, to_id, amount=10, currency="USD"):
    return {
        "from_account_id": from_id,
        "to_account_id": to_id,
        "amount": amount,
        "currency": currency,
    }


@pytest.mark.asyncio
async def test_transfer_to_someone_elses_account(client, store, accounts, auth_headers):
    src, dst = accounts["alice_usd"], accounts["bob_usd"]
    r = await client.post(
        "/transfers", json=_transfer(src.id, dst.id), headers=auth_headers("alice")
    )
    assert r.status_code == 200
    result = r.json()
    assert result["transfer"]["amount"] == 10
    assert result["from_entry"]["amount"] == -10
    assert result["to_entry"]["amount"] == 10
    assert result["from_account"]["balance"] == 90
    assert result["to_account"]["balance"] == 110

    assert store.get_account(src.id).balance == 90
    assert store.get_account(dst.id).balance == 110


@pytest.mark.asyncio
async def test_transfer_from_someone_elses_account(client, store, accounts, auth_headers):
    src, dst = accounts["bob_usd"], accounts["alice_usd"]
    r = await client.post(
        "/transfers", json=_transfer(src.id, dst.id), headers=auth_headers("alice")
    )
    assert r.status_code == 401
    assert r.json() == {"error": "from account doesn't belong to the authenticated user"}
    assert store.get_account(src.id).balance == 100
    assert store.get_account(dst.id).balance == 100


@pytest.mark.asyncio
async def test_transfer_from_account_not_found(client, accounts, auth_headers):
    r = await client.post(
        "/transfers",
        json=_transfer(999, accounts["bob_usd"].id),
        headers=auth_headers("alice"),
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_transfer_to_account_not_found(client, accounts, auth_headers):
    r = await client.post(
        "/transfers",
        json=_transfer(accounts["alice_usd"].id, 999),
        headers=auth_headers("alice"),
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_transfer_currency_mismatch(client, accounts, auth_headers):
    r = await client.post(
        "/transfers",
        json=_transfer(accounts["alice_usd"].id, accounts["bob_usd"].id, currency="EUR"),
        headers=auth_headers("alice"),
    )
    assert r.status_code == 400
    assert "currency mismatch" in r.json()["error"]


@pytest.mark.asyncio
async def test_transfer_destination_currency_mismatch(client, accounts, auth_headers):
    r = await client.post(
        "/transfers",
        json=_transfer(accounts["alice_eur"].id, accounts["bob_usd"].id, currency="EUR"),
        headers=auth_headers("alice"),
    )
    assert r.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [{"amount": 0}, {"amount": -5}, {"currency": "XYZ"}, {"from_account_id": 0}],
)
async def test_transfer_invalid_body(client, accounts, auth_headers, overrides):
    body = {**_transfer(accounts["alice_usd"].id, accounts["bob_usd"].id), **overrides}
    r = await client.post("/transfers", json=body, headers=auth_headers("alice"))
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_transfer_no_authorization(client, store, accounts):
    r = await client.post(
        "/transfers", json=_transfer(accounts["alice_usd"].id, accounts["bob_usd"].id)
    )
    assert r.status_code == 401
    assert store.get_account(accounts["alice_usd"].id).balance == 100
