import logging
import mongoengine
from mongoengine.connection import ConnectionFailure
from pymongo.errors import PyMongoError
from .document import DocumentRecordStore
from .local import LocalRecordStore

logger = logging.getLogger(__name__)

DOCUMENT_MODE = "document"
LOCAL_MODE = "local"
PLACEHOLDER_PATTERNS = ("<username>", "<password>", "cluster0.mongodb.net")


def is_placeholder_uri(uri):
    return not uri or any(pattern in uri for pattern in PLACEHOLDER_PATTERNS)


class StorageSelector:
    """Picks the storage mode once and keeps it for the life of the process.

    Selection blocks on a ``ping`` so no request is ever routed to a MongoDB
    connection whose outcome is still unknown.
    """

    def __init__(self, uri, timeout_ms=5000, **connect_kwargs):
        self.uri = uri
        self.timeout_ms = timeout_ms
        self.connect_kwargs = connect_kwargs
        self._mode = None

    @property
    def mode(self):
        if self._mode is None:
            self._mode = self._resolve()
        return self._mode

    def _resolve(self):
        if is_placeholder_uri(self.uri):
            logger.warning(
                "MongoDB credentials missing or default, switching to local in-memory mode"
            )
            return LOCAL_MODE
        try:
            mongoengine.connect(
                host=self.uri,
                serverSelectionTimeoutMS=self.timeout_ms,
                **self.connect_kwargs,
            )
            mongoengine.get_connection().admin.command("ping")
        except (PyMongoError, ConnectionFailure) as exc:
            logger.warning(
                "MongoDB connection failed, switching to local in-memory mode: %s", exc
            )
            mongoengine.disconnect()
            return LOCAL_MODE
        logger.info("MongoDB connected")
        return DOCUMENT_MODE

    def build_store(self):
        if self.mode == DOCUMENT_MODE:
            return DocumentRecordStore()
        return LocalRecordStore()
