# config/db_config.py
import logging
import re

from pymongo import MongoClient

logger = logging.getLogger(__name__)

_CREDENTIALS = re.compile(r"//[^@/]+@")


def mask_uri(uri):
    """Hide user:password in a connection string before logging it."""
    return _CREDENTIALS.sub("//***@", uri)


def create_client(settings):
    """
    Build the process-wide MongoClient.

    The driver connects lazily, so this never blocks on the server;
    connect and server selection are bounded by settings.connect_timeout.
    Retries are switched off: a failed attempt is reported immediately.
    """
    timeout_ms = int(settings.connect_timeout * 1000)
    client = MongoClient(
        settings.mongo_uri,
        connectTimeoutMS=timeout_ms,
        serverSelectionTimeoutMS=timeout_ms,
        retryReads=False,
        retryWrites=False,
    )
    logger.info("MongoDB client created for %s", mask_uri(settings.mongo_uri))
    return client


def get_students_collection(client, settings):
    return client[settings.mongo_db][settings.mongo_collection]
