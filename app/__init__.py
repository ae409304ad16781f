"""
EduGuide Platform
Backend for an education-guidance platform.

Architecture:
- MongoDB: every entity (users, profiles, college admins, placements, transactions)
- Upload directory: photos, mark sheets and placement CSVs
- FastAPI: one router per workflow
"""

__version__ = "1.0.0"
