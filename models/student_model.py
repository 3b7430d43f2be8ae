# models/student_model.py
import logging
from contextlib import contextmanager

import pymongo
from bson import ObjectId
from pymongo.errors import PyMongoError

from models.student_schema import STUDENT_FIELDS
from utils.errors import NotFoundError, StorageError

logger = logging.getLogger(__name__)

KEY_FIELD = "emailId"

# Records go out with exactly the five student fields, never Mongo's _id
_PUBLIC_PROJECTION = {"_id": 0}


def _to_serializable(o):
    if isinstance(o, ObjectId):
        return str(o)
    return o


class StudentGateway:
    """
    Storage gateway over the `students` collection.

    Every call runs under its own pymongo.timeout() deadline, so one slow
    operation never eats into another's budget. Driver failures come out
    as StorageError; a lookup miss comes out as NotFoundError.
    """

    def __init__(self, collection, op_timeout=5.0):
        self.collection = collection
        self.op_timeout = op_timeout

    @contextmanager
    def _bounded(self, operation):
        try:
            with pymongo.timeout(self.op_timeout):
                yield
        except PyMongoError as e:
            err = StorageError(operation, e)
            if err.timed_out:
                logger.warning("⏱️ %s timed out after %ss: %s", operation, self.op_timeout, e)
            else:
                logger.warning("❌ %s failed: %s", operation, e)
            raise err from e

    # -----------------------------
    # Operations
    # -----------------------------
    def insert(self, student):
        """Store a new record verbatim. No uniqueness check on emailId."""
        doc = student.model_dump()
        with self._bounded("insert"):
            result = self.collection.insert_one(doc)
        return {"InsertedID": _to_serializable(result.inserted_id)}

    def find_one(self, key):
        with self._bounded("find_one"):
            doc = self.collection.find_one({KEY_FIELD: key}, _PUBLIC_PROJECTION)
        if doc is None:
            raise NotFoundError()
        return doc

    def find_all(self):
        # natural storage order, no paging
        with self._bounded("find_all"):
            return list(self.collection.find({}, _PUBLIC_PROJECTION))

    def update_one(self, key, student):
        """
        Overwrite all five fields of the first record matching `key`.

        Zero matches is a normal outcome (MatchedCount == 0); nothing is
        upserted. The body's emailId replaces the stored one.
        """
        fields = student.model_dump()
        update = {"$set": {name: fields[name] for name in STUDENT_FIELDS}}
        with self._bounded("update_one"):
            result = self.collection.update_one({KEY_FIELD: key}, update, upsert=False)
        return {
            "MatchedCount": result.matched_count,
            "ModifiedCount": result.modified_count,
            "UpsertedCount": 0 if result.upserted_id is None else 1,
            "UpsertedID": _to_serializable(result.upserted_id),
        }

    def delete_one(self, key):
        with self._bounded("delete_one"):
            result = self.collection.delete_one({KEY_FIELD: key})
        return {"DeletedCount": result.deleted_count}

    def ping(self):
        with self._bounded("ping"):
            self.collection.database.command("ping")
        return True
