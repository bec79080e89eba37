#!/usr/bin/python

DOCUMENTATION = r"""
---
module: terrakube_output
short_description: Read the outputs of a Terrakube workspace.
description:
  - Reads the outputs of the most recent state of a Terrakube workspace.
  - Every output value is returned with its inferred type. Outputs marked as
    sensitive in the state are only returned in C(values).
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
  organization:
    description: Name of the organization that owns the workspace.
    required: true
    type: str
  workspace:
    description: Name of the workspace.
    required: true
    type: str
"""

EXAMPLES = r"""
- name: Read the outputs of the network workspace
  terrakube_output:
    api_url: https://terrakube-api.example.com
    access_token: "{{ terrakube_token }}"
    organization: platform
    workspace: network
  register: network
  no_log: true

- name: Use a non-sensitive output
  ansible.builtin.debug:
    msg: "{{ network.nonsensitive_values.vpc_id }}"
"""

RETURN = r"""
values:
  description: Every output of the workspace, including sensitive ones.
  returned: success
  type: dict
  sample: {"vpc_id": "vpc-0a1b2c", "db_password": "********"}
nonsensitive_values:
  description: Only the outputs that are not marked as sensitive.
  returned: success
  type: dict
  sample: {"vpc_id": "vpc-0a1b2c"}
output_types:
  description: The inferred type of every output.
  returned: success
  type: dict
  sample: {"vpc_id": "string", "subnets": "list(string)"}
diagnostics:
  description: Problems found while converting the output values.
  returned: failure
  type: list
  elements: dict
"""

from ansible.module_utils.basic import AnsibleModule

from ansible_terrakube.helpers import build_argument_spec
from ansible_terrakube.runners.output import OutputRunner

OPTIONS = {
    "organization": {"required": True, "type": "str"},
    "workspace": {"required": True, "type": "str"},
}


def main():
    module = AnsibleModule(
        argument_spec=build_argument_spec(OPTIONS), supports_check_mode=True
    )
    runner = OutputRunner(module, {})
    runner.run()


if __name__ == "__main__":
    main()
