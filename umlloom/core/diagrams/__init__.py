"""PlantUML class diagram generation for a whole type model.

Public API:
  DiagramService: renders one diagram per type and writes ``.puml`` files
  DiagramOutputError: raised when an artifact cannot be written
"""

from .service import DiagramOutputError, DiagramService

__all__ = ["DiagramService", "DiagramOutputError"]
