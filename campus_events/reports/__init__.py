"""Reports package initialization."""

from .aggregation import ReportService, attendance_percentage, average

__all__ = ['ReportService', 'attendance_percentage', 'average']
