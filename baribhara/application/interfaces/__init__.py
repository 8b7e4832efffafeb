"""Ports implemented by infrastructure (DIP)."""

from baribhara.application.interfaces.events import IEventPublisher
from baribhara.application.interfaces.repositories import IResourceRepository

__all__ = ["IEventPublisher", "IResourceRepository"]
