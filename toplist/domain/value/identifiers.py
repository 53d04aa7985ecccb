"""Strongly typed identifiers for toplist domain entities.

Servers use sequential integer IDs (they appear in public URLs); votes
and users use UUIDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ServerId = NewType("ServerId", int)
VoteId = NewType("VoteId", UUID)
