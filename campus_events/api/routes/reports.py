"""Report and dashboard routes. Every request recomputes from the store."""

from typing import Dict, List

from fastapi import APIRouter, Depends

from ..dependencies import get_reports
from ..errors import store_fault
from ...reports import ReportService

router = APIRouter(tags=["reports"])


@router.get("/reports/event-registrations", response_model=List[Dict])
def event_registrations(reports: ReportService = Depends(get_reports)):
    try:
        return [row.to_dict() for row in reports.registration_stats()]
    except Exception as e:
        raise store_fault(e, "Failed to fetch registration stats") from e


@router.get("/reports/event-attendance", response_model=List[Dict])
def event_attendance(reports: ReportService = Depends(get_reports)):
    try:
        return [row.to_dict() for row in reports.attendance_stats()]
    except Exception as e:
        raise store_fault(e, "Failed to fetch attendance stats") from e


@router.get("/reports/event-feedback", response_model=List[Dict])
def event_feedback(reports: ReportService = Depends(get_reports)):
    try:
        return [row.to_dict() for row in reports.feedback_stats()]
    except Exception as e:
        raise store_fault(e, "Failed to fetch feedback stats") from e


@router.get("/reports/event-popularity", response_model=List[Dict])
def event_popularity(reports: ReportService = Depends(get_reports)):
    try:
        return [row.to_dict() for row in reports.popularity_report()]
    except Exception as e:
        raise store_fault(e, "Failed to fetch popularity report") from e


@router.get("/reports/student-participation", response_model=List[Dict])
def student_participation(reports: ReportService = Depends(get_reports)):
    try:
        return [row.to_dict() for row in reports.participation_report()]
    except Exception as e:
        raise store_fault(e, "Failed to fetch participation report") from e


@router.get("/reports/top-active-students", response_model=List[Dict])
def top_active_students(reports: ReportService = Depends(get_reports)):
    try:
        return [row.to_dict() for row in reports.top_active_students()]
    except Exception as e:
        raise store_fault(e, "Failed to fetch top active students") from e


@router.get("/dashboard/stats", response_model=Dict)
def dashboard_stats(reports: ReportService = Depends(get_reports)):
    try:
        return reports.dashboard_summary().to_dict()
    except Exception as e:
        raise store_fault(e, "Failed to fetch dashboard stats") from e
