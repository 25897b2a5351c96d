"""Tests for the requests-based InvitationAPI client, run against the app in process."""

from unittest import mock

import requests
from bson import ObjectId

from invitation_client import InvitationAPI


def test_client_lifecycle(sdk):
    created, error = sdk.create_client({"name": "Acme", "contact": "a@b.com", "invitation_types": "wedding"})
    assert error is None
    client_id = created["inserted_id"]

    fetched, error = sdk.get_client(client_id)
    assert error is None
    assert fetched["name"] == "Acme"

    clients, error = sdk.list_clients()
    assert error is None
    assert [c["id"] for c in clients] == [client_id]

    ack, error = sdk.update_client(client_id, {"name": "Acme Events"})
    assert error is None
    assert ack["matched_count"] == 1

    ack, error = sdk.delete_client(client_id)
    assert ack == {"deleted_count": 1}


def test_guest_lifecycle(sdk, acme):
    created, error = sdk.create_guest({"name": "Jo", "message": "hi", "confirmation": "yes", "client_id": acme})
    assert error is None
    guest_id = created["inserted_id"]

    guests, error = sdk.list_guests(acme)
    assert error is None
    assert [g["id"] for g in guests] == [guest_id]

    ack, error = sdk.update_guest(guest_id, {"name": "Jo", "message": "hi", "confirmation": "no"})
    assert error is None
    guest, _ = sdk.get_guest(guest_id)
    assert guest["confirmation"] == "no"
    assert guest["client_id"] == acme

    ack, _ = sdk.delete_guest(guest_id)
    assert ack == {"deleted_count": 1}


def test_error_carries_status_and_code(sdk):
    data, error = sdk.create_guest(
        {"name": "Jo", "message": "hi", "confirmation": "yes", "client_id": str(ObjectId())}
    )
    assert data is None
    assert error["status_code"] == 409
    assert error["code"] == "unknown_reference"


def test_list_error_returns_empty_list(sdk):
    guests, error = sdk.list_guests("not-an-id")
    assert guests == []
    assert error["status_code"] == 400


def test_health(sdk):
    data, error = sdk.health()
    assert error is None
    assert data["status"] == "ok"


def test_transport_failure():
    session = mock.Mock()
    session.request.side_effect = requests.ConnectionError("refused")
    sdk = InvitationAPI(base_url="http://api.invalid/", session=session, timeout=3)

    data, error = sdk.get_client(str(ObjectId()))

    assert data is None
    assert error == {"status_code": None, "message": "refused", "code": None}
    kwargs = session.request.call_args.kwargs
    assert kwargs["url"].startswith("http://api.invalid/clients/")
    assert kwargs["timeout"] == 3
