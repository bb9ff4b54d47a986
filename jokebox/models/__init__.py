from jokebox.models.models import (
    Category,
    ClientActionKind,
    Severity,
    ShareOutcome,
    StorageItem,
    ToggleOutcome,
)

__all__ = [
    "Category",
    "ClientActionKind",
    "Severity",
    "ShareOutcome",
    "StorageItem",
    "ToggleOutcome",
]
