"""
AMP Client.

Request helper and typed response models for the AMP status service.
"""

from amp_cli.client.data import AmpStatus
from amp_cli.client.helper import AMP_STATUS_SVC, RequestHelper, ServiceOperation, new_helper

__all__ = [
    "AMP_STATUS_SVC",
    "AmpStatus",
    "RequestHelper",
    "ServiceOperation",
    "new_helper",
]
