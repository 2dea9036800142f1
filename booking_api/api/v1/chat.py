from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from loguru import logger
from pydantic import ValidationError

from booking_api.api.dependencies import get_chat_rooms
from booking_api.chat.rooms import ChatRoomManager
from booking_api.monitoring.metrics import chat_messages_total
from booking_api.schemas import ChatFrame

router = APIRouter()


def _error(message: str) -> dict:
    return {"event": "error", "data": {"message": message}}


@router.websocket("/ws/chat")
async def chat(websocket: WebSocket, rooms: ChatRoomManager = Depends(get_chat_rooms)):
    await websocket.accept()
    logger.info("Chat connection opened")

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))

            raw = message.get("text")
            if raw is None:
                await websocket.send_json(_error("Malformed frame"))
                continue
            try:
                frame = ChatFrame.model_validate_json(raw)
            except ValidationError:
                await websocket.send_json(_error("Malformed frame"))
                continue

            if frame.event == "join_room":
                if frame.data is None:
                    await websocket.send_json(_error("Room id required"))
                    continue
                room = str(frame.data)
                rooms.join(room, websocket)
                await websocket.send_json({"event": "joined", "data": room})

            elif frame.event == "send_message":
                if not isinstance(frame.data, dict) or frame.data.get("bookingId") is None:
                    await websocket.send_json(_error("bookingId required"))
                    continue
                room = str(frame.data["bookingId"])
                await rooms.broadcast(
                    room, {"event": "receive_message", "data": frame.data}, websocket
                )
                chat_messages_total.inc()

            else:
                await websocket.send_json(_error(f"Unknown event: {frame.event}"))
    except WebSocketDisconnect:
        logger.info("Chat connection closed")
    finally:
        rooms.leave_all(websocket)
