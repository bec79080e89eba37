from ansible_terrakube.helpers import rsql_equals
from ansible_terrakube.interfaces.runner import BaseRunner
from ansible_terrakube.models import TeamEntity


class TeamRunner(BaseRunner):
    """Returns the permission flags of a team within an organization."""

    def run(self):
        organization = self.find_organization(self.module.params["organization"])
        if organization is None:
            return

        name = self.module.params["name"]
        team = self._find_one(
            f"/api/v1/organization/{organization.id}/team",
            {"filter[team]": rsql_equals("name", name)},
            TeamEntity,
            f"Team '{name}' not found.",
        )
        if team is None:
            return
        self.module.exit_json(changed=False, team=team.model_dump())
