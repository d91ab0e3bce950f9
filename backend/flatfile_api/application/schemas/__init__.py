from .envelope import (
    ErrorEnvelope,
    MessageEnvelope,
    RecordEnvelope,
    RecordListEnvelope,
    success,
    success_list,
)

__all__ = [
    "ErrorEnvelope",
    "MessageEnvelope",
    "RecordEnvelope",
    "RecordListEnvelope",
    "success",
    "success_list",
]
