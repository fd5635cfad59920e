from .database import RecordStore
from .local import LocalRecordStore
from .document import DocumentRecordStore
from .selector import StorageSelector, DOCUMENT_MODE, LOCAL_MODE, is_placeholder_uri
