"""
Fixtures for integration tests.

IMPORTANT: these tests run against a real MongoDB (the test database).
Every test gets a fresh connection and ten seeded blog posts; the database
is dropped afterwards. Tests are skipped when MongoDB is unreachable.
"""
import logging
import pytest
from faker import Faker
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from api.database import connect_to_mongo, close_mongo_connection
from api.services.blog_post_store import BlogPostStore

from api import config

logger = logging.getLogger(__name__)

SEED_COUNT = 10

fake = Faker()


def generate_blog_post_data() -> dict:
    return {
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name()
        },
        "title": fake.sentence(),
        "content": fake.paragraph(),
        "created": fake.date_time_between(start_date="-7d", end_date="now")
    }


@pytest.fixture(scope="session")
def mongo_available() -> bool:
    client = MongoClient(config.MONGO_URL, serverSelectionTimeoutMS=2000)
    try:
        client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"MongoDB not reachable at {config.MONGO_URL}: {e}")
        return False
    finally:
        client.close()


@pytest.fixture(scope="function")
async def test_db(mongo_available):
    """
    Connect the app's database module to the test database for one test.
    """
    if not mongo_available:
        pytest.skip(f"MongoDB not reachable at {config.MONGO_URL}")

    db = await connect_to_mongo(config.MONGO_URL, config.DB_NAME)
    yield db
    await close_mongo_connection()


@pytest.fixture(scope="function")
async def seeded_posts(test_db):
    """Seed blog posts before the test and drop the database after it."""
    logger.info("Seeding BlogPost data")
    posts = await BlogPostStore.insert_many(
        [generate_blog_post_data() for _ in range(SEED_COUNT)]
    )
    yield posts
    logger.warning("Deleting database")
    await test_db.client.drop_database(config.DB_NAME)


@pytest.fixture
def new_post_data() -> dict:
    return generate_blog_post_data()
