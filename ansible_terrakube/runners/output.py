import logging

from pydantic import ValidationError

from ansible_terrakube.errors import PayloadDecodeError
from ansible_terrakube.helpers import rsql_equals
from ansible_terrakube.interfaces.runner import BaseRunner
from ansible_terrakube.jsonapi import decode_jsonapi_many
from ansible_terrakube.models import HistoryEntity, OutputDocument, WorkspaceEntity
from ansible_terrakube.projection import project_outputs

logger = logging.getLogger(__name__)


class OutputRunner(BaseRunner):
    """
    Reads the outputs of the most recent state of a workspace.

    The lookup walks organization -> workspace -> newest history entry, then
    downloads the state output document the entry links to. The outputs are
    returned twice: ``values`` with every output and ``nonsensitive_values``
    with only the outputs marked as non-sensitive.
    """

    def run(self):
        organization = self.find_organization(self.module.params["organization"])
        if organization is None:
            return

        workspace_name = self.module.params["workspace"]
        workspace = self._find_one(
            f"/api/v1/organization/{organization.id}/workspace",
            {"filter[workspace]": rsql_equals("name", workspace_name)},
            WorkspaceEntity,
            f"Workspace '{workspace_name}' not found.",
        )
        if workspace is None:
            return

        history = self.latest_history(organization.id, workspace.id)
        if history is None:
            # A workspace that never ran has no outputs; that is not an error.
            logger.info("No history found for workspace %s", workspace.id)
            self.module.exit_json(
                changed=False, values={}, nonsensitive_values={}, output_types={}
            )
            return

        document = self.read_output_document(history)
        if document is None:
            return

        projection = project_outputs(document.values.outputs)
        result = {
            "values": projection.values.to_native(),
            "nonsensitive_values": projection.nonsensitive_values.to_native(),
            "output_types": {
                name: str(descriptor)
                for name, descriptor in projection.output_types.items()
            },
        }

        errors = projection.diagnostics.report(self.module)
        if errors:
            self.module.fail_json(
                msg="Unable to convert workspace outputs:\n" + "\n".join(errors),
                diagnostics=[d.as_dict() for d in projection.diagnostics],
                **result,
            )
            return

        self.module.exit_json(changed=False, **result)

    def latest_history(self, organization_id, workspace_id):
        path = f"/api/v1/organization/{organization_id}/workspace/{workspace_id}/history"
        payload = self._send_request("GET", path, query_params={"sort": "-createdDate"})
        try:
            histories = decode_jsonapi_many(payload or {"data": []}, HistoryEntity)
        except PayloadDecodeError as e:
            self.module.fail_json(msg=f"Unable to decode workspace history: {e}")
            return None
        return histories[0] if histories else None

    def read_output_document(self, history: HistoryEntity):
        payload = self._send_request("GET", history.output)
        try:
            return OutputDocument.model_validate(payload)
        except ValidationError as e:
            self.module.fail_json(
                msg=f"State output document at {history.output} is malformed: {e}"
            )
            return None
