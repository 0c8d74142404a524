"""Dispute endpoints: GET /disputes and GET /disputes/{disputeID}."""

from typing import Optional

from moov.client import MoovClient
from moov.engine.call import accept_json, endpoint, query_params
from moov.engine.response import completed_list_or_error, completed_object_or_error
from moov.models.dispute import Dispute, DisputeListFilter

PATH_DISPUTES = "/disputes"
PATH_DISPUTE = "/disputes/%s"


async def list_disputes(client: MoovClient, filters: Optional[DisputeListFilter] = None) -> list[Dispute]:
    """List disputes matching ``filters``. Unset filters are not sent."""
    filters = filters or DisputeListFilter()
    resp = await client.call_http(
        endpoint("GET", PATH_DISPUTES),
        accept_json(),
        query_params(filters.model_dump(by_alias=True)),
    )
    return completed_list_or_error(resp, Dispute)


async def get_dispute(client: MoovClient, dispute_id: str) -> Dispute:
    resp = await client.call_http(endpoint("GET", PATH_DISPUTE, dispute_id), accept_json())
    return completed_object_or_error(resp, Dispute)
