"""Custom exceptions for the editing context."""

from typing import Optional


class DocumentInvariantError(AssertionError):
    """
    Raised when a Document's segment sequence breaks its structural invariants.

    This is a programming defect, never a user error: every Document operation
    returns a normalized segment sequence.

    Attributes:
        message: Error description
        segment_index: Index of the offending segment, when known
    """

    def __init__(self, message: str, segment_index: Optional[int] = None):
        self.message = message
        self.segment_index = segment_index

        if segment_index is not None:
            message = f"{message} (segment {segment_index})"

        super().__init__(message)


class ReentrantEditError(RuntimeError):
    """
    Raised when an EditingSession entry point is invoked while another is running.

    Attributes:
        operation: Entry point that was attempted
        active_operation: Entry point already in progress
    """

    def __init__(self, operation: str, active_operation: str):
        self.operation = operation
        self.active_operation = active_operation
        super().__init__(
            f"Cannot run '{operation}' while '{active_operation}' is in progress on this session"
        )
