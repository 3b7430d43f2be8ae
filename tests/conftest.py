import copy
from pathlib import Path
import sys

import pytest


# Make the repository root importable (app, config, models, routes, utils).
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config.settings import Settings  # noqa: E402
from utils.errors import NotFoundError  # noqa: E402


def _update_outcome(matched, modified):
    return {"MatchedCount": matched, "ModifiedCount": modified, "UpsertedCount": 0, "UpsertedID": None}


class FakeStudentGateway:
    """In-memory stand-in for StudentGateway with the same outcomes."""

    def __init__(self):
        self.docs = []
        self.fail_with = None
        self.calls = []

    def _check(self, operation):
        self.calls.append(operation)
        if self.fail_with is not None:
            raise self.fail_with

    def insert(self, student):
        self._check("insert")
        self.docs.append(student.model_dump())
        return {"InsertedID": f"{len(self.docs):024x}"}

    def find_one(self, key):
        self._check("find_one")
        for doc in self.docs:
            if doc["emailId"] == key:
                return copy.deepcopy(doc)
        raise NotFoundError()

    def find_all(self):
        self._check("find_all")
        return copy.deepcopy(self.docs)

    def update_one(self, key, student):
        self._check("update_one")
        for doc in self.docs:
            if doc["emailId"] == key:
                new = student.model_dump()
                modified = int(new != doc)
                doc.update(new)
                return _update_outcome(1, modified)
        return _update_outcome(0, 0)

    def delete_one(self, key):
        self._check("delete_one")
        for i, doc in enumerate(self.docs):
            if doc["emailId"] == key:
                del self.docs[i]
                return {"DeletedCount": 1}
        return {"DeletedCount": 0}

    def ping(self):
        self._check("ping")
        return True


@pytest.fixture
def gateway():
    return FakeStudentGateway()


@pytest.fixture
def client(gateway):
    from app import create_app

    app = create_app(Settings(), gateway=gateway)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def ann():
    return {"firstname": "Ann", "lastname": "Lee", "age": 20, "department": "CS", "emailId": "a@x.com"}
