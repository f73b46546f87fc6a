# app/api/v1/rooms.py
"""
Room inventory endpoints.

Reads are public; changes to the inventory require an admin.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.api.deps import get_room_service, require_admin
from app.schemas.room import RoomCreate, RoomUpdate
from app.services.room import RoomService
from .responses import from_result

router = APIRouter(prefix="/rooms", tags=["Room Management"])


@router.post("/add", dependencies=[Depends(require_admin)])
def add_room(request: RoomCreate, service: RoomService = Depends(get_room_service)) -> JSONResponse:
    return from_result(service.add_room(request), "room")


@router.get("/all")
def get_all_rooms(service: RoomService = Depends(get_room_service)) -> JSONResponse:
    return from_result(service.list_all(), "room_list")


@router.get("/types")
def get_room_types(service: RoomService = Depends(get_room_service)) -> JSONResponse:
    return from_result(service.get_room_types(), "room_types")


@router.get("/room-by-id/{room_id}")
def get_room_by_id(room_id: int, service: RoomService = Depends(get_room_service)) -> JSONResponse:
    return from_result(service.get_room_by_id(room_id), "room")


@router.get("/all-available-rooms")
def get_available_rooms(service: RoomService = Depends(get_room_service)) -> JSONResponse:
    return from_result(service.get_all_available_rooms(), "room_list")


@router.get("/available-rooms-by-date-and-type")
def get_available_rooms_by_date_and_type(
    check_in_date: date = Query(..., alias="checkInDate"),
    check_out_date: date = Query(..., alias="checkOutDate"),
    room_type: Optional[str] = Query(None, alias="roomType"),
    service: RoomService = Depends(get_room_service),
) -> JSONResponse:
    return from_result(service.list_available(check_in_date, check_out_date, room_type), "room_list")


@router.put("/update/{room_id}", dependencies=[Depends(require_admin)])
def update_room(
    room_id: int,
    request: RoomUpdate,
    service: RoomService = Depends(get_room_service),
) -> JSONResponse:
    return from_result(service.update_room(room_id, request), "room")


@router.delete("/delete/{room_id}", dependencies=[Depends(require_admin)])
def delete_room(room_id: int, service: RoomService = Depends(get_room_service)) -> JSONResponse:
    return from_result(service.delete_room(room_id))
