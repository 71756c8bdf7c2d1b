import uuid
from types import SimpleNamespace

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient


class InMemoryNodeStore:
    """Dict-backed stand-in for NodeStore, records every insert."""

    def __init__(self, nodes=()):
        self.nodes = {node.id: node for node in nodes}
        self.inserted = []

    def insert(self, **attrs):
        node = SimpleNamespace(id=uuid.uuid4(), **attrs)
        self.nodes[node.id] = node
        self.inserted.append(node)
        return node

    def find_by_id(self, node_id):
        return self.nodes.get(node_id)

    def list_all(self):
        return list(reversed(list(self.nodes.values())))


@pytest.fixture
def memory_store():
    return InMemoryNodeStore()


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username="alice", password="secret123")


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(username="bob", password="secret123")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client
