class RemarcError(Exception):
    """Base error for all user-facing Remarc exceptions."""


class ConfigurationError(RemarcError):
    """Raised when configuration is invalid or incomplete."""


class ProjectNotInitializedError(RemarcError):
    """Raised when .remarc metadata is missing."""


class DirectoryPropertiesError(RemarcError):
    """Raised when a directory's properties file is missing, unreadable or insufficient."""


class DocumentSinkError(RemarcError):
    """Raised when an assembled document cannot be written to the store."""


class UploadError(RemarcError):
    """Raised when an upload batch cannot be started."""


class InvalidResourceKindError(RemarcError):
    """Raised when an operation is requested for a kind without a storage folder."""


class InvalidIdentifierError(RemarcError):
    """Raised when an item identifier cannot name a file in a content folder."""
