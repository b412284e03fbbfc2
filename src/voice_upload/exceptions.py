"""Custom exceptions for the voice upload service."""


class NoFileUploadedError(Exception):
    """Raised when a request carries no audio file, or an empty one."""

    def __init__(self, reason: str = "no file in request"):
        self.reason = reason
        super().__init__(f"No audio file uploaded: {reason}")


class UploadTooLargeError(Exception):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, file_name: str, max_bytes: int):
        self.file_name = file_name
        self.max_bytes = max_bytes
        super().__init__(f"Upload '{file_name}' exceeds the {max_bytes} byte limit")


class TranscriptionError(Exception):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{file_name}'")


class StorageUploadError(Exception):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class StorageDeleteError(Exception):
    """Raised when removing an object from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to delete '{object_name}' from storage")


class TranscriptPersistenceError(Exception):
    """Raised when saving a transcription record to the database fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to persist transcription for '{file_name}'")


class ClientDisconnectedError(Exception):
    """Raised when the client goes away while its upload is being processed."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Client disconnected while processing '{file_name}'")


class TranscriptPersistenceTimeoutError(TranscriptPersistenceError):
    """Raised when a transcription insert does not finish in time.

    The insert may still commit after this is raised.
    """
