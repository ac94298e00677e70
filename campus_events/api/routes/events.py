"""Events router module."""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_joiner, get_store
from ..errors import store_fault
from ...db import EntityStore, RelationshipJoiner
from ...models.schemas import EventCreate, EventUpdate

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=List[Dict])
def list_events(joiner: RelationshipJoiner = Depends(get_joiner)):
    """Get all events with their college and registration count, latest date first."""
    try:
        return joiner.events_with_college_and_count()
    except Exception as e:
        raise store_fault(e, "Failed to fetch events") from e


@router.get("/{event_id}", response_model=Dict)
def get_event(event_id: str, store: EntityStore = Depends(get_store)):
    """Get a single event by ID."""
    try:
        event = store.get_event(event_id)
        if not event:
            raise HTTPException(status_code=404, detail="Event not found")
        return event.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to fetch event") from e


@router.post("", status_code=201, response_model=Dict)
def create_event(payload: EventCreate, store: EntityStore = Depends(get_store)):
    """Create an event for an existing college."""
    try:
        return store.create_event(payload).to_dict()
    except Exception as e:
        raise store_fault(e, "Failed to create event") from e


@router.put("/{event_id}", response_model=Dict)
def update_event(event_id: str, payload: EventUpdate, store: EntityStore = Depends(get_store)):
    """Update the fields present in the request body."""
    try:
        event = store.update_event(event_id, payload)
        if not event:
            raise HTTPException(status_code=404, detail="Event not found")
        return event.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to update event") from e


@router.delete("/{event_id}", status_code=204)
def delete_event(event_id: str, store: EntityStore = Depends(get_store)):
    """Delete an event. Refused with 409 while registrations reference it."""
    try:
        if not store.delete_event(event_id):
            raise HTTPException(status_code=404, detail="Event not found")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to delete event") from e


@router.get("/{event_id}/attendance", response_model=List[Dict])
def list_event_attendance(event_id: str, joiner: RelationshipJoiner = Depends(get_joiner)):
    """Attendance records for an event, with registration and student."""
    try:
        return joiner.attendance_for_event(event_id)
    except Exception as e:
        raise store_fault(e, "Failed to fetch attendance") from e


@router.get("/{event_id}/feedback", response_model=List[Dict])
def list_event_feedback(event_id: str, joiner: RelationshipJoiner = Depends(get_joiner)):
    """Feedback for an event, with registration and student."""
    try:
        return joiner.feedback_for_event(event_id)
    except Exception as e:
        raise store_fault(e, "Failed to fetch feedback") from e
