"""
Tests for Protocol Schemas

Tests for request serialization and server event decoding.
"""

import json

import pytest

from chat_session.schemas import (
    ChatLog,
    ChatMessage,
    JoinRoomRequest,
    Joined,
    LeaveRoomRequest,
    LeftRoom,
    ListRoomsRequest,
    LoggedIn,
    LoginRequest,
    LogoutRequest,
    NameTaken,
    ProtocolError,
    RoomList,
    decode_event,
)


class TestRequestSerialization:
    """Tests for outbound request frames."""

    def test_login_request(self):
        assert LoginRequest("alice").to_dict() == {
            "type": "login",
            "data": {"nickname": "alice"},
        }

    def test_join_room_request(self):
        request = JoinRoomRequest(nickname="alice", room="lobby")
        request_dict = request.to_dict()
        assert request_dict["type"] == "join_room"
        assert request_dict["data"] == {"nickname": "alice", "room": "lobby"}

    @pytest.mark.parametrize(
        "request_obj, message_type",
        [
            (ListRoomsRequest(), "list_rooms"),
            (LogoutRequest(), "logout"),
            (LeaveRoomRequest(), "leave_room"),
        ],
    )
    def test_requests_without_fields_have_no_data(
        self, request_obj, message_type
    ):
        assert request_obj.to_dict() == {"type": message_type}

    def test_chat_message_to_json(self):
        request_json = ChatMessage("alice", "hello there").to_json()
        assert json.loads(request_json) == {
            "type": "chat_message",
            "data": {"sender": "alice", "body": "hello there"},
        }


class TestEventDecoding:
    """Tests for decode_event()."""

    def test_logged_in(self):
        frame = {
            "type": "logged_in",
            "data": {"nickname": "alice", "session": "abc"},
        }
        assert decode_event(frame) == LoggedIn("alice", "abc")

    def test_name_taken_from_json(self):
        frame = json.dumps({"type": "name_taken", "data": {"nickname": "bob"}})
        assert decode_event(frame) == NameTaken("bob")

    def test_joined(self):
        frame = {"type": "joined", "data": {"room": "lobby"}}
        assert decode_event(frame) == Joined("lobby")

    def test_rooms_list_keeps_order(self):
        frame = {"type": "rooms_list", "data": {"rooms": ["z", "a", "m"]}}
        assert decode_event(frame) == RoomList(["z", "a", "m"])

    def test_chat_message(self):
        frame = {
            "type": "chat_message",
            "data": {"sender": "bob", "body": "hi"},
        }
        assert decode_event(frame) == ChatMessage("bob", "hi")

    def test_chat_log(self):
        frame = {
            "type": "chat_log",
            "data": {
                "messages": [
                    {"sender": "bob", "body": "one"},
                    {"sender": "carol", "body": "two"},
                ]
            },
        }
        assert decode_event(frame) == ChatLog(
            [ChatMessage("bob", "one"), ChatMessage("carol", "two")]
        )

    def test_left_room_without_data(self):
        assert decode_event('{"type": "left_room"}') == LeftRoom()

    def test_extra_fields_are_ignored(self):
        frame = {"type": "left_room", "data": {"room": "lobby"}}
        assert decode_event(frame) == LeftRoom()


class TestEventDecodingErrors:
    """Malformed frames raise ProtocolError."""

    def test_invalid_json(self):
        with pytest.raises(ProtocolError):
            decode_event("{not json")

    def test_non_object_frame(self):
        with pytest.raises(ProtocolError):
            decode_event("[1, 2, 3]")

    def test_unknown_type(self):
        with pytest.raises(ProtocolError, match="Unknown event type"):
            decode_event({"type": "explode"})

    def test_missing_field(self):
        with pytest.raises(ProtocolError, match="logged_in"):
            decode_event({"type": "logged_in", "data": {"nickname": "a"}})

    def test_rooms_must_be_a_list(self):
        with pytest.raises(ProtocolError):
            decode_event({"type": "rooms_list", "data": {"rooms": "lobby"}})

    def test_protocol_error_is_value_error(self):
        assert issubclass(ProtocolError, ValueError)
