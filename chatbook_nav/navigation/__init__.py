"""
Navigation module.
"""

from .account_classifier import AccountClassification, classify_accounts, get_initial_route
from .nav_reducer import nav_reducer
from .stack_router import StackRouter
from .navigation_manager import NavigationManager
from .screen_registry import ScreenRegistry

__all__ = [
    'AccountClassification',
    'classify_accounts',
    'get_initial_route',
    'nav_reducer',
    'StackRouter',
    'NavigationManager',
    'ScreenRegistry',
]
