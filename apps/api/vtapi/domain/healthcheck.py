"""Cluster capacity checks."""

import logging

from vtapi.adapters.conductor.base import ConductorClient
from vtapi.errors import HealthcheckError
from vtapi.schemas.conductor import Node, NodeProduct

logger = logging.getLogger(__name__)

_ACTIVE_NODE_STATUS = "active"


def count_active_workers(nodes: list[Node]) -> int:
    return sum(
        1
        for node in nodes
        if node.product == NodeProduct.SERVER.value and node.status == _ACTIVE_NODE_STATUS
    )


def check_cluster_health(client: ConductorClient) -> None:
    """Raise ``HealthcheckError`` when fewer workers are active than the cloud config requires.

    Conductor (controller) nodes never count toward the minimum.
    """
    cloud_config = client.get_cloud_config()
    nodes = client.get_nodes()
    active = count_active_workers(nodes)
    if active < cloud_config.min_nodes:
        logger.warning(
            "healthcheck.failed required=%s found=%s total_nodes=%s",
            cloud_config.min_nodes,
            active,
            len(nodes),
        )
        raise HealthcheckError(required=cloud_config.min_nodes, found=active)
