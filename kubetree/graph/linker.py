"""Cross-reference links not expressed as ownership.

Three rules, each applied once both endpoint kinds are indexed:

    service -> controller   label selector matched against pods, then
                            walked up to the pod's topmost controller
    pod -> claim            spec.volumes[].persistentVolumeClaim
    claim -> volume         spec.claimRef of a Bound volume
"""

from __future__ import annotations

from kubetree.graph.index import ResourceIndex, index_key
from kubetree.graph.models import TreeNode
from kubetree.models.resources import (
    CONTROLLER_KINDS,
    PersistentVolumeRecord,
    PodRecord,
    ResourceKind,
    ServiceRecord,
)
from kubetree.observability.logging import get_logger

_logger = get_logger("graph.linker")


def selector_matches(selector: dict[str, str], labels: dict[str, str]) -> bool:
    """True when every selector key is present in ``labels`` with the same value.

    An empty selector, or an unlabeled pod, never matches.
    """
    if not selector or not labels:
        return False
    return all(labels.get(key) == value for key, value in selector.items())


def find_pods_with_labels(index: ResourceIndex, namespace: str, selector: dict[str, str]) -> list[TreeNode]:
    """Pods in ``namespace`` selected by ``selector``, in registration order."""
    matches = []
    for node in index.nodes(ResourceKind.POD):
        pod = node.record
        if not isinstance(pod, PodRecord):
            raise TypeError(f"non-pod record indexed as Pod: {node!r}")
        if node.namespace == namespace and selector_matches(selector, pod.labels):
            matches.append(node)
    return matches


def controller_of(node: TreeNode) -> TreeNode:
    """Walk canonical parents upward while they are controllers.

    Returns the topmost controller above ``node``, or ``node`` itself when
    its parent is not a controller.
    """
    while node.parent is not None and node.parent.kind in CONTROLLER_KINDS:
        node = node.parent
    return node


def link_service(service: TreeNode, index: ResourceIndex) -> int:
    """Attach a service under the controller of every pod it selects.

    Returns the number of matching pods.
    """
    record = service.record
    assert isinstance(record, ServiceRecord)
    pods = find_pods_with_labels(index, record.namespace, record.selector)
    for pod in pods:
        service.relink(controller_of(pod))
    if not pods:
        _logger.debug("service selects no pods", namespace=record.namespace, name=record.name)
    return len(pods)


def link_pod_claims(pod: TreeNode, index: ResourceIndex) -> None:
    """Move every claim the pod mounts under the pod."""
    record = pod.record
    assert isinstance(record, PodRecord)
    for claim_name in record.claim_names:
        claim = index.lookup(ResourceKind.PERSISTENT_VOLUME_CLAIM, index_key(record.namespace, claim_name))
        if claim is None:
            _logger.debug("claim not indexed", namespace=record.namespace, pod=record.name, claim=claim_name)
            continue
        claim.relink(pod)


def link_volume_claim(volume: TreeNode, index: ResourceIndex) -> bool:
    """Move a bound volume under its claim.  Returns True when linked."""
    record = volume.record
    assert isinstance(record, PersistentVolumeRecord)
    ref = record.claim_ref
    if record.phase != "Bound" or ref is None or ref.kind != ResourceKind.PERSISTENT_VOLUME_CLAIM:
        return False

    claim = index.lookup(ResourceKind.PERSISTENT_VOLUME_CLAIM, index_key(ref.namespace, ref.name))
    if claim is None:
        _logger.debug("bound claim not indexed", volume=record.name, claim=index_key(ref.namespace, ref.name))
        return False
    volume.relink(claim)
    return True
