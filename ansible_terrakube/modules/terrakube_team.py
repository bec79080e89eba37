#!/usr/bin/python

DOCUMENTATION = r"""
---
module: terrakube_team
short_description: Get facts about a Terrakube team.
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
    description: Name of the organization the team belongs to.
    required: true
    type: str
  name:
    description: Name of the team.
    required: true
    type: str
"""

EXAMPLES = r"""
- name: Check what the operators team may do
  terrakube_team:
    api_url: https://terrakube-api.example.com
    access_token: "{{ terrakube_token }}"
    organization: platform
    name: operators
  register: team
"""

RETURN = r"""
team:
  description: The team and its permissions.
  returned: success
  type: dict
  contains:
    id:
      description: Team ID.
      type: str
    name:
      description: Team name.
      type: str
    manage_workspace:
      description: Whether the team can manage workspaces.
      type: bool
    manage_module:
      description: Whether the team can manage modules.
      type: bool
    manage_provider:
      description: Whether the team can manage providers.
      type: bool
    manage_vcs:
      description: Whether the team can manage VCS connections.
      type: bool
    manage_template:
      description: Whether the team can manage templates.
      type: bool
    manage_state:
      description: Whether the team can manage state.
      type: bool
    manage_collection:
      description: Whether the team can manage collections.
      type: bool
    manage_job:
      description: Whether the team can manage jobs.
      type: bool
"""

from ansible.module_utils.basic import AnsibleModule

from ansible_terrakube.helpers import build_argument_spec
from ansible_terrakube.runners.team import TeamRunner

OPTIONS = {
    "organization": {"required": True, "type": "str"},
    "name": {"required": True, "type": "str"},
}


def main():
    module = AnsibleModule(
        argument_spec=build_argument_spec(OPTIONS), supports_check_mode=True
    )
    runner = TeamRunner(module, {})
    runner.run()


if __name__ == "__main__":
    main()
