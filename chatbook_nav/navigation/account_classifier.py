"""
Decides where a restored session should land.

Only the first (default) account's API key is consulted. ``realm`` and
``email`` are carried in the payload but do not influence the decision.
"""

from enum import Enum, auto
from typing import Any, Sequence

from loguru import logger

from ..state.account_state import Account
from ..state.navigation_state import ACCOUNT_ROUTE, MAIN_ROUTE, WELCOME_ROUTE


class AccountClassification(Enum):
    """Account situations at startup, each with the route it leads to."""

    NO_ACCOUNTS = auto()
    SINGLE_AUTHENTICATED = auto()
    SINGLE_UNAUTHENTICATED = auto()
    MULTIPLE_AUTHENTICATED = auto()
    MULTIPLE_UNAUTHENTICATED = auto()

    @property
    def route_name(self) -> str:
        return _ROUTE_FOR_CLASSIFICATION[self]


_ROUTE_FOR_CLASSIFICATION = {
    AccountClassification.NO_ACCOUNTS: WELCOME_ROUTE,
    AccountClassification.SINGLE_AUTHENTICATED: MAIN_ROUTE,
    AccountClassification.SINGLE_UNAUTHENTICATED: WELCOME_ROUTE,
    AccountClassification.MULTIPLE_AUTHENTICATED: MAIN_ROUTE,
    AccountClassification.MULTIPLE_UNAUTHENTICATED: ACCOUNT_ROUTE,
}


def classify_accounts(accounts: Sequence[Any]) -> AccountClassification:
    """
    Classify the stored accounts.

    First matching rule wins: no accounts; then one account, authenticated
    or not; then several accounts, judged by the first one.

    Args:
        accounts: Account models or raw account mappings, default first

    Returns:
        The classification
    """
    if not accounts:
        return AccountClassification.NO_ACCOUNTS

    default_account = Account.from_raw(accounts[0])
    if len(accounts) == 1:
        if default_account.is_authenticated:
            return AccountClassification.SINGLE_AUTHENTICATED
        return AccountClassification.SINGLE_UNAUTHENTICATED

    if default_account.is_authenticated:
        return AccountClassification.MULTIPLE_AUTHENTICATED
    return AccountClassification.MULTIPLE_UNAUTHENTICATED


def get_initial_route(accounts: Sequence[Any]) -> str:
    """Route name a restored session should start on."""
    classification = classify_accounts(accounts)
    logger.debug(f"Classified {len(accounts or [])} account(s) as {classification.name} -> {classification.route_name}")
    return classification.route_name
