"""
MongoDB repository for word lists.

One document per list, words embedded. Provides load/save for the session
host and plain list management queries.
"""

from __future__ import annotations

import os
from typing import Optional

import structlog
from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection

from core.schemas import WordListDocument, default_lists
from core.scheduling.models import WordList

# Load environment
load_dotenv()

# Configuration
DEFAULT_DB_NAME = "vocab_trainer"
COLLECTION_NAME = "word_lists"

logger = structlog.get_logger(__name__)

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def get_db_name() -> str:
    """
    Database name, switched to a test database when TEST_MODE=true.
    """
    name = os.getenv("MONGO_DB_NAME", DEFAULT_DB_NAME)
    if os.getenv("TEST_MODE", "false").lower() == "true":
        return f"test_{name}"
    return name


def get_collection() -> Collection:
    """
    Get a connection to the MongoDB word list collection.

    Uses a persistent connection pool that's reused across requests.

    Returns:
        MongoDB collection object
    """
    global _client, _collection

    # Return cached collection if it exists
    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=10,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    _collection = _client[get_db_name()][COLLECTION_NAME]
    _collection.create_index("list_id", unique=True)

    return _collection


def set_collection(collection: Optional[Collection]) -> None:
    """Point the repository at an explicit collection (or reset with None)."""
    global _collection
    _collection = collection


# ---- Document Mapping ----

def document_to_list(doc: dict) -> WordList:
    """Validate a raw MongoDB document and convert it to a WordList."""
    doc = {key: value for key, value in doc.items() if key != "_id"}
    return WordListDocument.model_validate(doc).to_record()


def list_to_document(word_list: WordList) -> dict:
    """Serialize a WordList to the stored document shape."""
    return WordListDocument.from_record(word_list).model_dump(exclude={"version"})


# ---- Query Functions ----

def get_list(list_id: str) -> Optional[WordList]:
    """
    Load a single list.

    Returns:
        WordList, or None if no list has this id
    """
    doc = get_collection().find_one({"list_id": list_id})
    if doc is None:
        return None
    return document_to_list(doc)


def get_all_lists() -> list[WordList]:
    """All lists in creation order."""
    return [document_to_list(doc) for doc in get_collection().find({}).sort("_id", 1)]


def save_list(word_list: WordList) -> None:
    """
    Insert or replace a list document.
    """
    doc = list_to_document(word_list)
    get_collection().update_one(
        {"list_id": word_list.id},
        {"$set": doc, "$inc": {"version": 1}},
        upsert=True,
    )
    logger.debug("list_saved", list_id=word_list.id, words=len(word_list.words))


def delete_list(list_id: str) -> bool:
    """Delete a list. Returns True if a document was removed."""
    result = get_collection().delete_one({"list_id": list_id})
    return result.deleted_count > 0


def count_lists() -> int:
    return get_collection().count_documents({})


def seed_defaults() -> int:
    """
    Insert the demo lists if the collection is empty.

    Returns:
        Number of lists inserted
    """
    if count_lists() > 0:
        return 0
    lists = default_lists()
    for word_list in lists:
        save_list(word_list)
    logger.info("default_lists_seeded", count=len(lists))
    return len(lists)
