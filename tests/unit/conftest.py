import json
from unittest.mock import MagicMock, patch

import pytest

from ansible_terrakube.helpers import AUTH_FIXTURE


@pytest.fixture
def mock_ansible_module():
    """
    A pytest fixture that provides a mocked AnsibleModule instance for each test.
    This prevents tests from interfering with each other and from exiting the test runner.
    """
    # We patch 'AnsibleModule' in the runner's namespace to avoid import issues.
    with patch("ansible_terrakube.interfaces.runner.AnsibleModule") as mock_class:
        mock_module = mock_class.return_value
        mock_module.params = dict(AUTH_FIXTURE)
        mock_module.check_mode = False

        # Mock the exit methods to prevent sys.exit and to capture their arguments
        mock_module.exit_json = MagicMock()
        mock_module.fail_json = MagicMock()
        mock_module.warn = MagicMock()

        yield mock_module


@pytest.fixture
def run_module_harness():
    """
    Returns a harness that runs a module's main() with a mocked AnsibleModule
    and gives back the keyword arguments of exit_json and fail_json.
    """

    def harness(ansible_module, module_params):
        results = {"exit_json": None, "fail_json": None}

        with patch.object(ansible_module, "AnsibleModule") as mock_ansible_module_class:
            mock_module_instance = MagicMock()
            mock_module_instance.params = module_params
            mock_module_instance.check_mode = False
            mock_module_instance.exit_json.side_effect = lambda **kwargs: results.update(
                exit_json=kwargs
            )
            mock_module_instance.fail_json.side_effect = lambda **kwargs: results.update(
                fail_json=kwargs
            )
            mock_module_instance.jsonify = json.dumps

            mock_ansible_module_class.return_value = mock_module_instance

            ansible_module.main()

        return results["exit_json"], results["fail_json"]

    return harness


@pytest.fixture
def jsonapi_document():
    """Returns a builder of JSON:API list documents from (id, attributes) pairs."""

    def build(resource_type, *resources):
        return {
            "data": [
                {"type": resource_type, "id": resource_id, "attributes": attributes}
                for resource_id, attributes in resources
            ]
        }

    return build
