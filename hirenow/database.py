import logging
import os
from pathlib import Path
from urllib.parse import quote_plus

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)

# .env sits next to the hirenow/ package
env_path = Path(__file__).resolve().parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
else:
    load_dotenv()

DATABASE_NAME = os.getenv("DATABASE_NAME", "hirenow")


def build_mongo_uri() -> str:
    """Resolve the connection string: MONGO_URI wins, then DB_USER/DB_PASS."""
    uri = os.getenv("MONGO_URI")
    if uri:
        return uri

    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASS")
    if user and password:
        host = os.getenv("DB_HOST", "cluster0.mongodb.net")
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}"
            "/?retryWrites=true&w=majority"
        )

    return "mongodb://localhost:27017"


def _describe_host(uri: str) -> str:
    # Never log credentials
    return uri.rsplit("@", 1)[-1]


async def connect_to_mongo(app: FastAPI):
    uri = build_mongo_uri()

    client = AsyncIOMotorClient(uri, server_api=ServerApi("1"))
    app.state.mongo_client = client
    app.state.db = client[DATABASE_NAME]

    await client.admin.command("ping")
    logger.info("Connected to MongoDB at %s (database: %s)", _describe_host(uri), DATABASE_NAME)


async def close_mongo_connection(app: FastAPI):
    client = getattr(app.state, "mongo_client", None)
    if client:
        client.close()
        logger.info("MongoDB connection closed")


def get_db(request: Request):
    """FastAPI dependency returning the database opened at startup."""
    return request.app.state.db


def serialize_doc(doc):
    """Render the ObjectId of a stored document as a hex string."""
    if doc is not None and "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


# Store results are answered the way the driver reports them
def insert_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}


def update_result(result) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
    }


def delete_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
