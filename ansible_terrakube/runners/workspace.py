from ansible_terrakube.helpers import rsql_equals
from ansible_terrakube.interfaces.runner import BaseRunner
from ansible_terrakube.models import WorkspaceEntity


class WorkspaceRunner(BaseRunner):
    """Returns the attributes of a workspace within an organization."""

    def run(self):
        organization = self.find_organization(self.module.params["organization"])
        if organization is None:
            return

        name = self.module.params["name"]
        workspace = self._find_one(
            f"/api/v1/organization/{organization.id}/workspace",
            {"filter[workspace]": rsql_equals("name", name)},
            WorkspaceEntity,
            f"Workspace '{name}' not found.",
        )
        if workspace is None:
            return

        data = workspace.model_dump()
        data["organization_id"] = organization.id
        self.module.exit_json(changed=False, workspace=data)
