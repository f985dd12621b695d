"""Kubernetes Secret lookups for API keys referenced by the solver config."""

from __future__ import annotations

import logging
import threading
from base64 import b64decode
from pathlib import Path

from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException

from hetzner_webhook.config import SERVICE_ACCOUNT_NAMESPACE_FILE
from hetzner_webhook.errors import ConfigError, SecretNotFound

logger = logging.getLogger(__name__)


def read_namespace(path: str = SERVICE_ACCOUNT_NAMESPACE_FILE) -> str:
    """Return the namespace the webhook pod runs in."""
    try:
        namespace = Path(path).read_text().strip()
    except OSError as exc:
        raise ConfigError(f"Unable to read namespace from {path}: {exc}") from exc
    logger.debug("Running in namespace %s", namespace)
    return namespace


class KubernetesSecretResolver:
    """Callable ``(namespace, name, key) -> str`` backed by the Kubernetes API.

    The API client is built on first use: in-cluster config when running in a
    pod, the local kubeconfig otherwise.
    """

    def __init__(self, _core_api: k8s_client.CoreV1Api | None = None) -> None:
        self._api = _core_api
        self._lock = threading.Lock()

    def _ensure_client(self) -> k8s_client.CoreV1Api:
        with self._lock:
            if self._api is None:
                try:
                    k8s_config.load_incluster_config()
                except ConfigException:
                    k8s_config.load_kube_config()
                self._api = k8s_client.CoreV1Api()
            return self._api

    def __call__(self, namespace: str, name: str, key: str) -> str:
        api = self._ensure_client()
        try:
            secret = api.read_namespaced_secret(name=name, namespace=namespace)
        except ApiException as exc:
            if exc.status == 404:
                raise SecretNotFound(namespace, name) from exc
            raise ConfigError(f"Unable to read secret '{namespace}/{name}': {exc.status} {exc.reason}") from exc

        data = secret.data or {}
        if key not in data:
            raise SecretNotFound(namespace, name, key)
        logger.debug("Gathered secret %s/%s from apiserver", namespace, name)
        return b64decode(data[key]).decode()
