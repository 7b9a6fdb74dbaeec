"""
Directory-level exceptions.

Every business rule violation is a subclass of DirectoryError so the
console layer can catch them uniformly and print the message as-is.
"""


class DirectoryError(Exception):
    """Base class for all directory errors."""


class DuplicateEmployeeError(DirectoryError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("User ID already exists. Please choose a different ID.")


class EmployeeNotFoundError(DirectoryError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"Employee not found with User ID: {user_id}")


class PermissionDeniedError(DirectoryError):
    """The session's role does not grant the requested operation."""


class SelfDeleteError(DirectoryError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("Cannot delete your own account while logged in.")


class NotLoggedInError(DirectoryError):
    def __init__(self):
        super().__init__("No user is logged in.")
