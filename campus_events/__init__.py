"""Campus event management backend.

Colleges, events and students, registrations with attendance and feedback,
and the reports computed over them.
"""

__version__ = "1.0.0"
