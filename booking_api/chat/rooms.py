from collections import defaultdict
from typing import Any, Dict, Set

from fastapi import WebSocket, WebSocketDisconnect
from loguru import logger


class ChatRoomManager:
    """
    Process-local registry of booking chat rooms.

    Rooms are keyed by booking id. A message sent to a room is delivered to
    every member except the sender; nothing is stored.
    """

    def __init__(self):
        self._rooms: Dict[str, Set[WebSocket]] = defaultdict(set)

    def join(self, room: str, websocket: WebSocket) -> None:
        self._rooms[room].add(websocket)
        logger.debug(f"Connection joined room {room} ({self.members(room)} members)")

    def leave(self, room: str, websocket: WebSocket) -> None:
        members = self._rooms.get(room)
        if members is None:
            return
        members.discard(websocket)
        if not members:
            del self._rooms[room]

    def leave_all(self, websocket: WebSocket) -> None:
        for room in list(self._rooms):
            self.leave(room, websocket)

    def members(self, room: str) -> int:
        return len(self._rooms.get(room, ()))

    async def broadcast(self, room: str, frame: Dict[str, Any], sender: WebSocket) -> int:
        delivered = 0
        for member in list(self._rooms.get(room, ())):
            if member is sender:
                continue
            try:
                await member.send_json(frame)
            except (WebSocketDisconnect, RuntimeError) as e:
                # a dead member must not cut off the rest of the room
                logger.debug(f"Dropping unreachable member of room {room}: {e!r}")
                self.leave(room, member)
                continue
            delivered += 1
        return delivered
