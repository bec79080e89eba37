#!/usr/bin/python

DOCUMENTATION = r"""
---
module: terrakube_organization
short_description: Get facts about a Terrakube organization.
options:
  api_url:
    description: Fully qualified URL of the Terrakube API, e.g. https://terrakube-api.example.com.
    required: true
    type: str
  access_token:
    description: A Terrakube personal or team access token.
    required: true
    type: str
  validate_certs:
    description: Whether to verify the TLS certificate of the API.
    default: true
    type: bool
  name:
    description: Name of the organization.
    required: true
    type: str
"""

EXAMPLES = r"""
- name: Look up the platform organization
  terrakube_organization:
    api_url: https://terrakube-api.example.com
    access_token: "{{ terrakube_token }}"
    name: platform
  register: org
"""

RETURN = r"""
organization:
  description: The organization.
  returned: success
  type: dict
  contains:
    id:
      description: Organization ID.
      type: str
    name:
      description: Organization name.
      type: str
    description:
      description: Organization description.
      type: str
    execution_mode:
      description: Default execution mode of the organization.
      type: str
    disabled:
      description: Whether the organization is disabled.
      type: bool
"""

from ansible.module_utils.basic import AnsibleModule

from ansible_terrakube.helpers import build_argument_spec
from ansible_terrakube.runners.organization import OrganizationRunner

OPTIONS = {
    "name": {"required": True, "type": "str"},
}


def main():
    module = AnsibleModule(
        argument_spec=build_argument_spec(OPTIONS), supports_check_mode=True
    )
    runner = OrganizationRunner(module, {})
    runner.run()


if __name__ == "__main__":
    main()
