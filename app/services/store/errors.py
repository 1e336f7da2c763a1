"""Errors raised by the data manager when an operation is rejected.

A rejected operation never changes state or publishes a notification.
"""


class DataManagerError(Exception):
    """Base class for rejected data manager operations."""


class InvalidGroupNameError(DataManagerError):
    """Group name is empty or already in use."""


class InvalidQuantityError(DataManagerError):
    """Quantity is negative."""


class ProtectedGroupError(DataManagerError):
    """Attempt to delete or rename the Favorites group."""


class NotFoundError(DataManagerError):
    """Unknown item, group or order."""


class GroupNotFoundError(NotFoundError):
    pass


class ItemNotFoundError(NotFoundError):
    pass


class OrderNotFoundError(NotFoundError):
    pass
