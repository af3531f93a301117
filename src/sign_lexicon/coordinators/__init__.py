"""Coordinators - Orchestration layer connecting the presentation layer with services."""

from .favorites_transfer_coordinator import FavoritesTransferCoordinator

__all__ = ["FavoritesTransferCoordinator"]
