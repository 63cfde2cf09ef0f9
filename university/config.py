"""
university/config.py

Module-level constants for the records layer.
No environment variables are read.
"""

# Course.faculty_id value meaning "no faculty assigned yet". Every int,
# including 0, is a usable faculty id.
UNASSIGNED_FACULTY_ID: None = None
