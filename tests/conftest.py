"""Pytest configuration and fixtures for kibana-client tests."""

import pytest
import respx

from kibana_client import KibanaClient, with_base_url


KIBANA_URL = "http://kibana.test"
API_URL = "http://kibana.test/api/"


# ============================================================================
# Sample Payloads
# ============================================================================


@pytest.fixture
def space_data():
    """Space as returned by the API."""
    return {
        "id": "marketing",
        "name": "Marketing",
        "description": "This is the Marketing Space",
        "color": "#aabbcc",
        "initials": "MK",
        "disabledFeatures": ["timelion"],
        "imageUrl": "",
    }


@pytest.fixture
def spaces_list(space_data):
    """List of spaces as returned by the API."""
    return [
        {
            "id": "default",
            "name": "Default",
            "description": "This is the Default Space",
            "disabledFeatures": [],
            "_reserved": True,
        },
        space_data,
    ]


@pytest.fixture
def role_data():
    """Role as returned by the API."""
    return {
        "name": "my_kibana_role",
        "metadata": {"version": 1},
        "transient_metadata": {"enabled": True},
        "elasticsearch": {
            "indices": [
                {
                    "names": ["logs-*"],
                    "privileges": ["read", "view_index_metadata"],
                    "field_security": {"grant": ["*"], "except": ["secret"]},
                    "allow_restricted_indices": False,
                }
            ],
            "cluster": ["monitor"],
            "run_as": [],
        },
        "kibana": [
            {"base": ["all"], "feature": {}, "spaces": ["default"]},
            {
                "base": [],
                "feature": {"discover": ["read"], "ml": ["all"]},
                "spaces": ["marketing"],
            },
        ],
        "_transform_error": [],
        "_unrecognized_applications": [],
    }


@pytest.fixture
def not_found_error():
    """Error payload for a missing space."""
    return {
        "statusCode": 404,
        "error": "Not Found",
        "message": "Saved object [space/missing] not found",
    }


# ============================================================================
# Clients
# ============================================================================


@pytest.fixture
def client():
    """Basic auth client pointed at the mocked API."""
    client = KibanaClient.from_basic_auth("elastic", "changeme", with_base_url(KIBANA_URL))
    yield client
    client.close()


@pytest.fixture
def api_key_client():
    """API key client pointed at the mocked API."""
    client = KibanaClient.from_api_key("a2V5OnNlY3JldA==", with_base_url(KIBANA_URL))
    yield client
    client.close()


@pytest.fixture
def kibana_api():
    """respx router intercepting every request sent through httpx."""
    with respx.mock(assert_all_called=False) as router:
        yield router
