"""Resource sources: where the tree builder's records come from.

A source lists every record of one kind within a scope (a single namespace
or ALL_NAMESPACES).  ``KubernetesSource`` reads a live cluster through
kubernetes-asyncio; ``StaticSource`` serves records held in memory.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from kubetree.collector.decode import record_from_dict
from kubetree.models.config import ALL_NAMESPACES
from kubetree.models.resources import ResourceKind, ResourceRecord
from kubetree.observability.logging import get_logger

_logger = get_logger("collector.source")


class ResourceFetchError(Exception):
    """Raised when a collection cannot be fetched.  Fatal to the build."""

    def __init__(self, kind: str, cause: Exception) -> None:
        super().__init__(f"Failed to fetch {kind}: {cause}")
        self.kind = kind
        self.cause = cause


class ResourceSource(Protocol):
    async def list_records(self, kind: ResourceKind, namespace: str) -> list[ResourceRecord]:
        """List every ``kind`` record in ``namespace`` (ALL_NAMESPACES for all)."""
        ...


class StaticSource:
    """In-memory source.

    Namespace scoping mirrors the cluster: namespaces filter by name,
    persistent volumes are cluster-scoped and always returned.
    """

    def __init__(self, records: Iterable[ResourceRecord] = ()) -> None:
        self._records: list[ResourceRecord] = list(records)

    async def list_records(self, kind: ResourceKind, namespace: str) -> list[ResourceRecord]:
        matches = [r for r in self._records if r.kind == kind]
        if namespace == ALL_NAMESPACES or kind == ResourceKind.PERSISTENT_VOLUME:
            return matches
        if kind == ResourceKind.NAMESPACE:
            found = [r for r in matches if r.name == namespace]
            if not found:
                raise LookupError(f'namespaces "{namespace}" not found')
            return found
        return [r for r in matches if r.namespace == namespace]


# kind -> (api, namespaced list method, all-namespaces list method)
_LIST_METHODS: dict[ResourceKind, tuple[str, str, str]] = {
    ResourceKind.DEPLOYMENT: ("apps", "list_namespaced_deployment", "list_deployment_for_all_namespaces"),
    ResourceKind.REPLICA_SET: ("apps", "list_namespaced_replica_set", "list_replica_set_for_all_namespaces"),
    ResourceKind.STATEFUL_SET: ("apps", "list_namespaced_stateful_set", "list_stateful_set_for_all_namespaces"),
    ResourceKind.DAEMON_SET: ("apps", "list_namespaced_daemon_set", "list_daemon_set_for_all_namespaces"),
    ResourceKind.POD: ("core", "list_namespaced_pod", "list_pod_for_all_namespaces"),
    ResourceKind.SERVICE: ("core", "list_namespaced_service", "list_service_for_all_namespaces"),
    ResourceKind.PERSISTENT_VOLUME_CLAIM: (
        "core",
        "list_namespaced_persistent_volume_claim",
        "list_persistent_volume_claim_for_all_namespaces",
    ),
}


class KubernetesSource:
    """Lists resources from the Kubernetes API via kubernetes-asyncio.

    API objects are converted to their camelCase dict form with
    ``ApiClient.sanitize_for_serialization`` and decoded from there, so the
    live and file-based paths share one decoder.
    """

    def __init__(self, api_client: Any, core_api: Any = None, apps_api: Any = None) -> None:
        if core_api is None or apps_api is None:
            from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

            core_api = core_api if core_api is not None else k8s_client.CoreV1Api(api_client)
            apps_api = apps_api if apps_api is not None else k8s_client.AppsV1Api(api_client)

        self._api_client = api_client
        self._apis = {"core": core_api, "apps": apps_api}

    async def list_records(self, kind: ResourceKind, namespace: str) -> list[ResourceRecord]:
        items = await self._list_items(kind, namespace)
        _logger.debug("listed", kind=kind.value, namespace=namespace or "*", count=len(items))
        return [record_from_dict(kind, self._api_client.sanitize_for_serialization(item)) for item in items]

    async def _list_items(self, kind: ResourceKind, namespace: str) -> list[Any]:
        core = self._apis["core"]
        if kind == ResourceKind.NAMESPACE:
            if namespace != ALL_NAMESPACES:
                return [await core.read_namespace(namespace)]
            return list((await core.list_namespace()).items)
        if kind == ResourceKind.PERSISTENT_VOLUME:
            return list((await core.list_persistent_volume()).items)

        api_name, namespaced, all_namespaces = _LIST_METHODS[kind]
        api = self._apis[api_name]
        if namespace != ALL_NAMESPACES:
            response = await getattr(api, namespaced)(namespace)
        else:
            response = await getattr(api, all_namespaces)()
        return list(response.items)


async def connect(kubeconfig: str = "") -> Any:
    """Load cluster credentials and return a kubernetes-asyncio ApiClient.

    An explicit kubeconfig path wins; otherwise the in-cluster service
    account is tried first, then the default kubeconfig location.
    """
    import kubernetes_asyncio.config as k8s_config  # type: ignore[import-untyped]
    from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]

    try:
        if kubeconfig:
            await k8s_config.load_kube_config(config_file=kubeconfig)
            _logger.debug("k8s client configured from kubeconfig", path=kubeconfig)
        else:
            try:
                # load_incluster_config() is synchronous in kubernetes-asyncio
                k8s_config.load_incluster_config()
                _logger.debug("k8s client configured from in-cluster service account")
            except k8s_config.ConfigException:
                await k8s_config.load_kube_config()
                _logger.debug("k8s client configured from default kubeconfig")
    except Exception as exc:
        raise ResourceFetchError("client", exc) from exc

    return k8s_client.ApiClient()
