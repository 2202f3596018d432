"""
Eurobot results dashboard: API, CSV ingestion and client.
"""
__version__ = "0.1.0"
