# flake8: noqa
"""Clients for the Smart Fee bumping service.

The package is organized around an abstract base class, `BaseFeeService`.
`SmartFeeRestClient` talks to a live Smart Fee environment over HTTP; tests
substitute their own deterministic implementations."""
from .base_service import BaseFeeService
from .rest_client import SmartFeeRestClient
