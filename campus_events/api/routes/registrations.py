"""Registration, attendance and feedback routes."""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_joiner, get_store
from ..errors import store_fault
from ...db import EntityStore, RelationshipJoiner
from ...models.schemas import AttendanceCreate, AttendanceUpdate, FeedbackCreate, RegistrationCreate

router = APIRouter(tags=["registrations"])


@router.get("/registrations", response_model=List[Dict])
def list_registrations(joiner: RelationshipJoiner = Depends(get_joiner)):
    """All registrations with event and student, most recent first."""
    try:
        return joiner.registrations_with_event_and_student()
    except Exception as e:
        raise store_fault(e, "Failed to fetch registrations") from e


@router.post("/registrations", status_code=201, response_model=Dict)
def create_registration(payload: RegistrationCreate, store: EntityStore = Depends(get_store)):
    """Register a student for an event. A second registration for the same pair is a 409."""
    try:
        return store.create_registration(payload).to_dict()
    except Exception as e:
        raise store_fault(e, "Failed to create registration") from e


@router.delete("/registrations/{registration_id}", status_code=204)
def delete_registration(registration_id: str, store: EntityStore = Depends(get_store)):
    """Delete a registration together with its attendance and feedback."""
    try:
        if not store.delete_registration(registration_id):
            raise HTTPException(status_code=404, detail="Registration not found")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to delete registration") from e


@router.post("/attendance", status_code=201, response_model=Dict)
def mark_attendance(payload: AttendanceCreate, store: EntityStore = Depends(get_store)):
    try:
        return store.mark_attendance(payload).to_dict()
    except Exception as e:
        raise store_fault(e, "Failed to mark attendance") from e


@router.put("/attendance/{attendance_id}", response_model=Dict)
def update_attendance(attendance_id: str, payload: AttendanceUpdate, store: EntityStore = Depends(get_store)):
    try:
        attendance = store.update_attendance(attendance_id, payload.attended)
        if not attendance:
            raise HTTPException(status_code=404, detail="Attendance record not found")
        return attendance.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to update attendance") from e


@router.post("/feedback", status_code=201, response_model=Dict)
def submit_feedback(payload: FeedbackCreate, store: EntityStore = Depends(get_store)):
    try:
        return store.submit_feedback(payload).to_dict()
    except Exception as e:
        raise store_fault(e, "Failed to submit feedback") from e
