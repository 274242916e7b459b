"""unievents — university event management API.

Authentication, event CRUD and venue records for a campus events site.
"""

__version__ = "0.1.0"
