"""
Views layer - UI presentation components.
"""

from views.home_view import HomeView

__all__ = ["HomeView"]
