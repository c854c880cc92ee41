from dotenv import load_dotenv
from typing import List, Optional
from models import Property, PropertyCreate
import threading
import logging
import json
import os

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

PROPERTIES_FILE = os.getenv("PROPERTIES_FILE", "properties.json")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
PORT = int(os.getenv("PORT", "5000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


class PropertyNotFound(LookupError):
    pass


class PropertyStore:
    """Ordered list of property records mirrored to a JSON file.

    Every mutation rewrites the whole file before returning. Write errors are
    logged and otherwise ignored, so memory and disk can drift apart.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        self._records: List[Property] = []
        self._lock = threading.RLock()

    def load(self):
        records = []
        try:
            if os.path.exists(self.file_path):
                with open(self.file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                records = [Property(**item) for item in data]
        except Exception as e:
            logger.error(f"Error reading properties file {self.file_path}: {str(e)}")
            records = []
        with self._lock:
            self._records = records
        logger.info(f"Loaded {len(records)} properties from {self.file_path}")
        return self

    def persist(self):
        with self._lock:
            # Fields the client never sent are left out, not written as null
            data = [record.model_dump(exclude_none=True) for record in self._records]
            try:
                with open(self.file_path, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except Exception as e:
                logger.error(f"Error writing properties file {self.file_path}: {str(e)}")

    def all(self) -> List[Property]:
        with self._lock:
            return list(self._records)

    def next_id(self) -> int:
        with self._lock:
            return max((p.id for p in self._records), default=0) + 1

    def append(self, record: Property):
        with self._lock:
            self._records.append(record)
            self.persist()

    def create(self, fields: PropertyCreate, image: str = "") -> Property:
        with self._lock:
            record = Property(id=self.next_id(), image=image, **fields.model_dump())
            self.append(record)
            return record

    def remove(self, property_id: Optional[int]) -> Property:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == property_id:
                    del self._records[index]
                    self.persist()
                    return record
        raise PropertyNotFound(property_id)


property_store = PropertyStore(PROPERTIES_FILE).load()


def get_property_store() -> PropertyStore:
    return property_store
