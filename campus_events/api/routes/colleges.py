"""Colleges router module."""

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_store
from ..errors import store_fault
from ...db import EntityStore
from ...models.schemas import CollegeCreate, CollegeUpdate

router = APIRouter(prefix="/colleges", tags=["colleges"])


@router.get("", response_model=List[Dict])
def list_colleges(store: EntityStore = Depends(get_store)):
    """Get all colleges, by name."""
    try:
        return [college.to_dict() for college in store.list_colleges()]
    except Exception as e:
        raise store_fault(e, "Failed to fetch colleges") from e


@router.get("/{college_id}", response_model=Dict)
def get_college(college_id: str, store: EntityStore = Depends(get_store)):
    """Get a single college by ID."""
    try:
        college = store.get_college(college_id)
        if not college:
            raise HTTPException(status_code=404, detail="College not found")
        return college.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to fetch college") from e


@router.post("", status_code=201, response_model=Dict)
def create_college(payload: CollegeCreate, store: EntityStore = Depends(get_store)):
    """Create a college."""
    try:
        return store.create_college(payload).to_dict()
    except Exception as e:
        raise store_fault(e, "Failed to create college") from e


@router.put("/{college_id}", response_model=Dict)
def update_college(college_id: str, payload: CollegeUpdate, store: EntityStore = Depends(get_store)):
    """Update the fields present in the request body."""
    try:
        college = store.update_college(college_id, payload)
        if not college:
            raise HTTPException(status_code=404, detail="College not found")
        return college.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to update college") from e


@router.delete("/{college_id}", status_code=204)
def delete_college(college_id: str, store: EntityStore = Depends(get_store)):
    """Delete a college. Refused with 409 while events or students reference it."""
    try:
        if not store.delete_college(college_id):
            raise HTTPException(status_code=404, detail="College not found")
        return Response(status_code=204)
    except HTTPException:
        raise
    except Exception as e:
        raise store_fault(e, "Failed to delete college") from e
