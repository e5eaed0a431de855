import pytest

from .schema import BOATS, schema
from .utils import create_api_client


class Context:
    def __init__(self):
        self.received_inputs = []


@pytest.fixture(autouse=True)
def clear_boats():
    BOATS.clear()


@pytest.fixture
def context():
    return Context()


@pytest.fixture
def api_client(context):
    client = create_api_client(schema)
    client.execute_options["context"] = context
    return client
