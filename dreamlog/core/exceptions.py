# dreamlog/core/exceptions.py


class DreamlogError(Exception):
    """Base class for errors raised by the analytics engine"""


class MalformedInputError(DreamlogError, ValueError):
    """A record in the snapshot breaks one of the journal invariants"""

    def __init__(self, record, reason):
        self.record = record
        self.reason = reason
        super().__init__(f"Malformed record {record}: {reason}")


class ConfigurationError(DreamlogError, ValueError):
    """Report configuration was rejected before computation"""
