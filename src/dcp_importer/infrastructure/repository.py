"""MongoDB repository for problem descriptions."""

from datetime import datetime, timezone

from bson.errors import BSONError
from loguru import logger
from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from dcp_importer.config import Settings
from dcp_importer.domain.exceptions import BootstrapError, ConfigurationError, StorageError
from dcp_importer.domain.models import ProblemDescription


class MongoProblemRepository:
    """Reads the latest stored problem number and inserts new problems."""

    def __init__(self, client: MongoClient, collection: Collection):
        """
        Initialize repository.

        Args:
            client: Connected MongoDB client, closed by close()
            collection: Collection holding problem descriptions
        """
        self.client = client
        self.collection = collection

    @classmethod
    def connect(cls, settings: Settings) -> "MongoProblemRepository":
        """
        Connect to MongoDB and check the server answers.

        Raises:
            ConfigurationError: If the URI is invalid or the server is unreachable
        """
        logger.debug(f"Connecting to MongoDB database {settings.mongo_db!r}")

        client = None
        try:
            client = MongoClient(
                settings.mongo_uri,
                serverSelectionTimeoutMS=settings.mongo_timeout_ms,
            )
            client.admin.command("ping")
        except PyMongoError as e:
            if client is not None:
                client.close()
            raise ConfigurationError(f"Unable to connect to MongoDB: {e}") from e

        collection = client[settings.mongo_db][settings.mongo_collection]
        logger.info(f"Connected to MongoDB collection {settings.mongo_db}.{settings.mongo_collection}")
        return cls(client, collection)

    def latest_problem_number(self) -> int:
        """
        Return the highest problem number already stored.

        Raises:
            BootstrapError: If the collection is empty or cannot be queried
        """
        try:
            document = self.collection.find_one({}, sort=[("number", DESCENDING)])
        except PyMongoError as e:
            raise BootstrapError(f"Unable to query latest problem: {e}") from e

        if document is None:
            raise BootstrapError(
                f"No problems stored in {self.collection.name}; "
                "at least one existing problem is required"
            )

        number = document.get("number")
        if not isinstance(number, int) or isinstance(number, bool):
            raise BootstrapError(f"Latest problem has no valid number: {number!r}")

        logger.info(f"Latest problem number: {number}")
        return number

    def insert(self, problem: ProblemDescription) -> ProblemDescription:
        """
        Insert a problem and fill in its id and timestamps.

        Raises:
            StorageError: If the insert fails
        """
        now = datetime.now(timezone.utc)
        problem.created_at = now
        problem.updated_at = now

        try:
            result = self.collection.insert_one(problem.to_document())
        except (PyMongoError, BSONError, OverflowError) as e:
            raise StorageError(f"Unable to create problem {problem.number}: {e}") from e

        problem.id = result.inserted_id
        return problem

    def close(self) -> None:
        self.client.close()
        logger.debug("MongoDB connection closed")
