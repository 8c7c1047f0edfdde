"""
Internship Tracker
Record management for students, their internships and placements.

Architecture:
- PostgreSQL: students, internships, placements (one shared async pool)
- Azure Blob Storage: resume files, shared through read-only SAS URLs
- Azure AI Language / OpenAI: skill analysis and recommendations
"""

__version__ = "1.0.0"
