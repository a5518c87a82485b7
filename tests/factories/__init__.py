"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import AccountFactory, ResourceFactory
"""

from tests.factories.base import DEFAULT_SEGMENT, BaseFactory, generate_uid, utc_now
from tests.factories.crm import AccountFactory, ResourceFactory

__all__ = [
    # Base
    "BaseFactory",
    "DEFAULT_SEGMENT",
    "generate_uid",
    "utc_now",
    # CRM
    "AccountFactory",
    "ResourceFactory",
]
