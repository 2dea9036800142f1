import asyncio

import pytest
from fastapi import WebSocketDisconnect

from booking_api.chat.rooms import ChatRoomManager


class FakeSocket:
    def __init__(self):
        self.sent = []

    async def send_json(self, data):
        self.sent.append(data)


class DeadSocket:
    async def send_json(self, data):
        raise WebSocketDisconnect(1006)


def test_broadcast_skips_sender_and_other_rooms():
    rooms = ChatRoomManager()
    alice, bob, carol = FakeSocket(), FakeSocket(), FakeSocket()
    rooms.join("7", alice)
    rooms.join("7", bob)
    rooms.join("8", carol)

    frame = {"event": "receive_message", "data": {"bookingId": 7, "text": "hi"}}
    delivered = asyncio.run(rooms.broadcast("7", frame, alice))

    assert delivered == 1
    assert bob.sent == [frame]
    assert alice.sent == []
    assert carol.sent == []


def test_broadcast_drops_dead_member_and_reaches_the_rest():
    rooms = ChatRoomManager()
    alice, dead, bob = FakeSocket(), DeadSocket(), FakeSocket()
    rooms.join("7", alice)
    rooms.join("7", dead)
    rooms.join("7", bob)

    frame = {"event": "receive_message", "data": {"bookingId": 7, "text": "hi"}}
    delivered = asyncio.run(rooms.broadcast("7", frame, alice))

    assert delivered == 1
    assert bob.sent == [frame]
    assert rooms.members("7") == 2

    # the dead member is gone, so the next message reaches bob without error
    asyncio.run(rooms.broadcast("7", frame, alice))
    assert bob.sent == [frame, frame]


def test_leave_all_drops_empty_rooms():
    rooms = ChatRoomManager()
    alice, bob = FakeSocket(), FakeSocket()
    rooms.join("1", alice)
    rooms.join("2", alice)
    rooms.join("2", bob)

    rooms.leave_all(alice)

    assert rooms.members("1") == 0
    assert rooms.members("2") == 1


@pytest.mark.api
def test_message_relayed_to_other_room_members(api_client):
    with api_client.websocket_connect("/ws/chat") as alice, api_client.websocket_connect(
        "/ws/chat"
    ) as bob:
        alice.send_json({"event": "join_room", "data": 7})
        assert alice.receive_json() == {"event": "joined", "data": "7"}
        bob.send_json({"event": "join_room", "data": "7"})
        assert bob.receive_json() == {"event": "joined", "data": "7"}

        message = {"bookingId": 7, "sender": "alice", "text": "Is my car ready?"}
        alice.send_json({"event": "send_message", "data": message})

        assert bob.receive_json() == {"event": "receive_message", "data": message}

        # the sender gets nothing back: the next frame it sees answers its next request
        alice.send_json({"event": "typing"})
        assert alice.receive_json() == {
            "event": "error",
            "data": {"message": "Unknown event: typing"},
        }


@pytest.mark.api
def test_malformed_frames_answered_with_error(api_client):
    with api_client.websocket_connect("/ws/chat") as ws:
        ws.send_text("not json")
        assert ws.receive_json()["event"] == "error"

        ws.send_json({"event": "send_message", "data": {"text": "no room"}})
        assert ws.receive_json() == {
            "event": "error",
            "data": {"message": "bookingId required"},
        }


@pytest.mark.api
def test_binary_frame_answered_with_error(api_client):
    with api_client.websocket_connect("/ws/chat") as ws:
        ws.send_bytes(b"\x00\x01")
        assert ws.receive_json() == {
            "event": "error",
            "data": {"message": "Malformed frame"},
        }

        # connection stays usable
        ws.send_json({"event": "join_room", "data": 3})
        assert ws.receive_json() == {"event": "joined", "data": "3"}
