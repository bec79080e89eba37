from ansible_terrakube.interfaces.runner import BaseRunner


class OrganizationRunner(BaseRunner):
    """Returns the attributes of an organization looked up by name."""

    def run(self):
        organization = self.find_organization(self.module.params["name"])
        if organization is None:
            return
        self.module.exit_json(changed=False, organization=organization.model_dump())
