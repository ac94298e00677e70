"""Students router module."""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_joiner, get_store
from ..errors import store_fault
from ...db import EntityStore, RelationshipJoiner
from ...models.schemas import StudentCreate, StudentUpdate

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=List[Dict])
def list_students(joiner: RelationshipJoiner = Depends(get_joiner)):
    """Get all students with their college, by name."""
    try:
        return joiner.students_with_college()
    except Exception as e:
        raise store_fault(e, "Failed to fetch students") from e


@router.get("/{student_id}", response_model=Dict)
def get_student(student_id: str, store: EntityStore = Depends(get_store)):
    """Get a single student by ID."""
    try:
        student = store.get_student(student_id)
        if not student:
            raise HTTPException(status_code=404, detail="Student not found")
        return student.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to fetch student") from e


@router.post("", status_code=201, response_model=Dict)
def create_student(payload: StudentCreate, store: EntityStore = Depends(get_store)):
    """Create a student. The email must not be in use."""
    try:
        return store.create_student(payload).to_dict()
    except Exception as e:
        raise store_fault(e, "Failed to create student") from e


@router.put("/{student_id}", response_model=Dict)
def update_student(student_id: str, payload: StudentUpdate, store: EntityStore = Depends(get_store)):
    """Update the fields present in the request body."""
    try:
        student = store.update_student(student_id, payload)
        if not student:
            raise HTTPException(status_code=404, detail="Student not found")
        return student.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to update student") from e


@router.delete("/{student_id}", status_code=204)
def delete_student(student_id: str, store: EntityStore = Depends(get_store)):
    """Delete a student. Refused with 409 while registrations reference them."""
    try:
        if not store.delete_student(student_id):
            raise HTTPException(status_code=404, detail="Student not found")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to delete student") from e
