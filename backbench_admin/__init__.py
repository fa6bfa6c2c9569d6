"""
Backbench Admin - Back-office API for the student discount marketplace

A FastAPI-based service that serves administrator dashboard statistics,
student redemption histories and student moderation over the
marketplace's backend-as-a-service data.
"""

__version__ = "0.1.0"
