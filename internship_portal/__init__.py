"""
PM Internship Portal
Backend for the internship portal: accounts, insurance, bank verification
and rule-based internship recommendations.

Architecture:
- MongoDB: Users, insurance records, preferences, internship catalog
- FastAPI: HTTP layer
- JWT: Bearer-token authentication
"""

__version__ = "1.0.0"
