"""Record storage services."""

from cheesedir.services.mirror_service import CheeseMirrorService, MirrorStoreError
from cheesedir.services.record_store import RecordStore

__all__ = [
    "CheeseMirrorService",
    "MirrorStoreError",
    "RecordStore",
]
