import logging
from urllib.parse import urlencode

from ansible.module_utils.basic import AnsibleModule
from ansible.module_utils.urls import fetch_url

from ansible_terrakube.errors import PayloadDecodeError
from ansible_terrakube.helpers import rsql_equals
from ansible_terrakube.jsonapi import decode_jsonapi_many, loads
from ansible_terrakube.models import OrganizationEntity

logger = logging.getLogger(__name__)

JSONAPI_CONTENT_TYPE = "application/vnd.api+json"


class BaseRunner:
    """
    Abstract base class for all module runners.
    It handles common initialization tasks, such as setting up the API client
    and resolving the organization most Terrakube resources are scoped to.
    """

    def __init__(self, module: AnsibleModule, context: dict):
        """
        Initializes the runner.

        Args:
            module: The AnsibleModule instance.
            context: A dictionary containing configuration and data for the runner.
        """
        self.module = module
        self.context = context

    def run(self):
        """
        The main execution method for the runner.
        This method should be implemented by all subclasses.
        """
        raise NotImplementedError

    def _build_url(self, path, query_params=None) -> str:
        # Absolute URLs (such as links to state files) are used as they are.
        if path.startswith("http://") or path.startswith("https://"):
            url = path
        else:
            url = f"{self.module.params['api_url'].rstrip('/')}/{path.lstrip('/')}"

        if query_params:
            url += "?" + urlencode(list(query_params.items()))
        return url

    def _send_request(self, method, path, query_params=None):
        """
        A wrapper around fetch_url that authenticates with the bearer token and
        returns the decoded JSON body.
        """
        url = self._build_url(path, query_params)
        logger.debug("%s %s", method, url)

        response, info = fetch_url(
            self.module,
            url,
            headers={
                "Authorization": f"Bearer {self.module.params['access_token']}",
                "Content-Type": JSONAPI_CONTENT_TYPE,
            },
            method=method,
            timeout=30,
        )

        body_content = None
        if response:
            body_content = response.read()
        # fetch_url keeps the error body in info when the request failed.
        if body_content is None and info.get("body"):
            body_content = info["body"]

        status_code = info["status"]

        if status_code not in [200, 201, 202, 204]:
            error_details = ""
            if body_content:
                if isinstance(body_content, bytes):
                    body_content = body_content.decode(errors="ignore")
                error_details = f" API Response: {body_content}"
            self.module.fail_json(
                msg=f"Request to {url} failed. Status: {status_code}. Message: {info.get('msg')}.{error_details}"
            )
            return None

        if not body_content:
            # An empty GET body means an empty collection.
            return [] if method == "GET" else None

        try:
            return loads(body_content)
        except ValueError:
            self.module.fail_json(
                msg=f"API returned a success status ({status_code}) but the response was not valid JSON.",
                response_body=body_content.decode(errors="ignore")
                if isinstance(body_content, bytes)
                else body_content,
            )
            return None

    def _find_one(self, path, query_params, record_type, not_found_msg):
        """
        Lists ``path`` and returns the matching record. When several records
        match, the last one wins. Fails the module when nothing matched.
        """
        payload = self._send_request("GET", path, query_params=query_params)
        try:
            records = decode_jsonapi_many(payload or {"data": []}, record_type)
        except PayloadDecodeError as e:
            self.module.fail_json(msg=f"Unable to decode response from {path}: {e}")
            return None

        if not records:
            self.module.fail_json(msg=not_found_msg)
            return None
        return records[-1]

    def find_organization(self, name: str) -> OrganizationEntity:
        return self._find_one(
            "/api/v1/organization",
            {"filter[organization]": rsql_equals("name", name)},
            OrganizationEntity,
            f"Organization '{name}' not found.",
        )
