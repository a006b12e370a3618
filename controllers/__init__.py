"""
Controllers layer - orchestration and session state management.
"""

from controllers.greeting_controller import GreetingController

__all__ = ["GreetingController"]
