"""API endpoints package."""

from . import health
from . import catalog
from . import generation
from . import proposals
from . import account_executives
from . import settings

__all__ = ["health", "catalog", "generation", "proposals", "account_executives", "settings"]
