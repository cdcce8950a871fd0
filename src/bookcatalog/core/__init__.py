# ABOUTME: Core edit workflow: change detection, audit messages, and save sessions.
# ABOUTME: Exports BookEditor, BookChanges, and the diff helpers.

from bookcatalog.core.audit import BookChanges, apply_changes, diff_book
from bookcatalog.core.editor import BookEditor, SaveResult

__all__ = [
    "BookChanges",
    "BookEditor",
    "SaveResult",
    "apply_changes",
    "diff_book",
]
