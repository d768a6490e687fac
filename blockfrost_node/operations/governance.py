"""On-chain governance operations (DReps and proposals)."""

from blockfrost_node.operations.definitions import PAGED, OperationDefinition

CATEGORY = ("governance", "Governance")

_DREP = ("drepId",)
_PROPOSAL = ("txHash", "certIndex")
_PROPOSAL_PATH = "/governance/proposals/{txHash}/{certIndex}"

OPERATIONS = [
    OperationDefinition(
        "governance",
        "getDreps",
        "Get Delegate Representatives",
        "Return the information about Delegate Representatives (DReps)",
        path="/governance/dreps",
        paging=PAGED,
    ),
    OperationDefinition(
        "governance",
        "getDrep",
        "Get Delegate Representative",
        "Return the information about a specific DRep",
        path="/governance/dreps/{drepId}",
        required=_DREP,
    ),
    OperationDefinition(
        "governance",
        "getDrepDelegators",
        "Get DRep Delegators",
        "List of delegators to a specific DRep",
        path="/governance/dreps/{drepId}/delegators",
        required=_DREP,
        paging=PAGED,
    ),
    OperationDefinition(
        "governance",
        "getDrepMetadata",
        "Get DRep Metadata",
        "Return the metadata of a specific DRep",
        path="/governance/dreps/{drepId}/metadata",
        required=_DREP,
    ),
    OperationDefinition(
        "governance",
        "getDrepUpdates",
        "Get DRep Updates",
        "List of certificate updates to the DRep",
        path="/governance/dreps/{drepId}/updates",
        required=_DREP,
        paging=PAGED,
    ),
    OperationDefinition(
        "governance",
        "getDrepVotes",
        "Get DRep Votes",
        "History of DRep votes",
        path="/governance/dreps/{drepId}/votes",
        required=_DREP,
        paging=PAGED,
    ),
    OperationDefinition(
        "governance",
        "getProposals",
        "Get Proposals",
        "List of governance proposals",
        path="/governance/proposals",
        paging=PAGED,
    ),
    OperationDefinition(
        "governance",
        "getProposal",
        "Get Proposal",
        "Return the information about a specific proposal",
        path=_PROPOSAL_PATH,
        required=_PROPOSAL,
    ),
    OperationDefinition(
        "governance",
        "getProposalParameters",
        "Get Proposal Parameters",
        "Return the parameters of a parameter change proposal",
        path=_PROPOSAL_PATH + "/parameters",
        required=_PROPOSAL,
    ),
    OperationDefinition(
        "governance",
        "getProposalWithdrawals",
        "Get Proposal Withdrawals",
        "Return the withdrawals of a treasury withdrawal proposal",
        path=_PROPOSAL_PATH + "/withdrawals",
        required=_PROPOSAL,
        paging=PAGED,
    ),
    OperationDefinition(
        "governance",
        "getProposalVotes",
        "Get Proposal Votes",
        "History of proposal votes",
        path=_PROPOSAL_PATH + "/votes",
        required=_PROPOSAL,
        paging=PAGED,
    ),
    OperationDefinition(
        "governance",
        "getProposalMetadata",
        "Get Proposal Metadata",
        "Return the metadata of a specific proposal",
        path=_PROPOSAL_PATH + "/metadata",
        required=_PROPOSAL,
    ),
]
