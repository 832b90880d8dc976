"""
Controllers Package

High-level upload coordinators.
"""

from assets.controllers.upload_orchestrator import UploadOrchestrator

__all__ = [
    "UploadOrchestrator",
]
