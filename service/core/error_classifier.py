from service.dal.errors import StorageError, StorageErrorKind

# Backend health conditions a caller may retry
TRANSIENT_STORAGE_ERROR_KINDS = frozenset(
    {
        StorageErrorKind.NOT_CONFIGURED,
        StorageErrorKind.THROUGHPUT_EXCEEDED,
        StorageErrorKind.UNAVAILABLE,
    }
)


def is_transient_backend_error(err: BaseException) -> bool:
    """Return True only for storage failures that mean the backend is unavailable."""
    if not isinstance(err, StorageError):
        return False
    return err.kind in TRANSIENT_STORAGE_ERROR_KINDS
