"""Webhook entry point — serves cert-manager ChallengePayload requests over HTTP."""

from __future__ import annotations

import logging
from collections.abc import Callable

import uvicorn
from fastapi import Body, FastAPI, HTTPException

from hetzner_webhook.config import load_config
from hetzner_webhook.dns.base import Solver
from hetzner_webhook.errors import ConfigError, WebhookError
from hetzner_webhook.models import ChallengeRequest, ChallengeResponse
from hetzner_webhook.secret_store import KubernetesSecretResolver, read_namespace
from hetzner_webhook.solver import HetznerSolver

logger = logging.getLogger(__name__)

API_VERSION = "acme.cert-manager.io/v1alpha1"


def _run_challenge(handler: Callable[[ChallengeRequest], None], challenge: ChallengeRequest) -> ChallengeResponse:
    """Run a solver operation, turning any failure into an unsuccessful response."""
    try:
        handler(challenge)
    except WebhookError as exc:
        logger.error("%s for %s failed: %s", challenge.action, challenge.dns_name, exc)
        return ChallengeResponse(uid=challenge.uid, success=False, message=str(exc))
    except Exception as exc:
        logger.exception("Unexpected error during %s for %s", challenge.action, challenge.dns_name)
        return ChallengeResponse(uid=challenge.uid, success=False, message=str(exc))
    return ChallengeResponse(uid=challenge.uid, success=True)


def create_app(solver: Solver, group_name: str) -> FastAPI:
    """Build the webhook API serving ``solver`` under ``/apis/<group_name>/v1alpha1``."""
    app = FastAPI(title="cert-manager-webhook-hetzner")

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    @app.get("/apis/{group}/v1alpha1")
    def discovery(group: str) -> dict:
        """APIResourceList checked by the apiserver before it routes challenges here."""
        if group != group_name:
            raise HTTPException(status_code=404, detail=f"Unknown group '{group}'")
        return {
            "kind": "APIResourceList",
            "apiVersion": "v1",
            "groupVersion": f"{group_name}/v1alpha1",
            "resources": [
                {
                    "name": solver.name(),
                    "singularName": solver.name(),
                    "namespaced": False,
                    "kind": "ChallengePayload",
                    "verbs": ["create"],
                }
            ],
        }

    @app.post("/apis/{group}/v1alpha1/{solver_name}")
    def solve(group: str, solver_name: str, payload: dict = Body(...)) -> dict:
        if group != group_name or solver_name != solver.name():
            raise HTTPException(status_code=404, detail=f"No solver '{solver_name}' in group '{group}'")

        raw_request = payload.get("request")
        if not isinstance(raw_request, dict):
            raise HTTPException(status_code=400, detail="ChallengePayload has no request")
        try:
            challenge = ChallengeRequest.from_dict(raw_request)
        except (KeyError, TypeError) as exc:
            raise HTTPException(status_code=400, detail=f"Invalid challenge request: {exc!r}")

        handlers = {"Present": solver.present, "CleanUp": solver.clean_up}
        handler = handlers.get(challenge.action)
        if handler is None:
            raise HTTPException(status_code=400, detail=f"Unknown challenge action: '{challenge.action}'")

        response = _run_challenge(handler, challenge)
        return {
            "apiVersion": payload.get("apiVersion", API_VERSION),
            "kind": "ChallengePayload",
            "response": response.to_dict(),
        }

    return app


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        namespace = read_namespace(config.namespace_file)
    except ConfigError as exc:
        logger.warning("%s — secret references resolve in the challenge's namespace", exc)
        namespace = None

    solver = HetznerSolver(
        resolve_secret=KubernetesSecretResolver(),
        namespace=namespace,
        api_base_url=config.api_base_url,
        http_timeout=config.http_timeout,
    )
    solver.initialize()

    logger.info("Serving solver '%s' for group %s", solver.name(), config.group_name)
    uvicorn.run(
        create_app(solver, config.group_name),
        host=config.listen_host,
        port=config.listen_port,
        ssl_certfile=config.tls_cert_file,
        ssl_keyfile=config.tls_key_file,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
