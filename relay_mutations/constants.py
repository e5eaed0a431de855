CLIENT_MUTATION_ID = "client_mutation_id"
CLIENT_MUTATION_ID_FIELD_NAME = "clientMutationId"
CLIENT_MUTATION_ID_DESCRIPTION = (
    "A unique identifier for the client performing the mutation."
)

INPUT_ARGUMENT = "input"

RESERVED_NAME_POLICY_REJECT = "reject"
RESERVED_NAME_POLICY_OVERRIDE = "override"
RESERVED_NAME_POLICIES = (RESERVED_NAME_POLICY_REJECT, RESERVED_NAME_POLICY_OVERRIDE)
