#!/usr/bin/python

DOCUMENTATION = r"""
---
module: terrakube_workspace
short_description: Get facts about a Terrakube workspace.
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
  name:
    description: Name of the workspace.
    required: true
    type: str
"""

EXAMPLES = r"""
- name: Look up the network workspace
  terrakube_workspace:
    api_url: https://terrakube-api.example.com
    access_token: "{{ terrakube_token }}"
    organization: platform
    name: network
  register: ws
"""

RETURN = r"""
workspace:
  description: The workspace.
  returned: success
  type: dict
  contains:
    id:
      description: Workspace ID.
      type: str
    organization_id:
      description: ID of the owning organization.
      type: str
    name:
      description: Workspace name.
      type: str
    description:
      description: Workspace description.
      type: str
    source:
      description: URL of the repository holding the workspace code.
      type: str
    branch:
      description: Repository branch.
      type: str
    folder:
      description: Folder within the repository.
      type: str
    template_id:
      description: ID of the default template.
      type: str
    iac_type:
      description: Infrastructure-as-code tool, e.g. terraform or tofu.
      type: str
    iac_version:
      description: Version of the infrastructure-as-code tool.
      type: str
    execution_mode:
      description: Where jobs run, local or remote.
      type: str
    deleted:
      description: Whether the workspace is deleted.
      type: bool
    allow_remote_apply:
      description: Whether remote apply is allowed.
      type: bool
    vcs_id:
      description: ID of the VCS connection, when the workspace has one.
      type: str
"""

from ansible.module_utils.basic import AnsibleModule

from ansible_terrakube.helpers import build_argument_spec
from ansible_terrakube.runners.workspace import WorkspaceRunner

OPTIONS = {
    "organization": {"required": True, "type": "str"},
    "name": {"required": True, "type": "str"},
}


def main():
    module = AnsibleModule(
        argument_spec=build_argument_spec(OPTIONS), supports_check_mode=True
    )
    runner = WorkspaceRunner(module, {})
    runner.run()


if __name__ == "__main__":
    main()
