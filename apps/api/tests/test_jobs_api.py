"""Job and provider HTTP API tests."""

from __future__ import annotations

import os
import unittest

from fastapi.testclient import TestClient

from vtapi.adapters.conductor import ConductorClientError, InMemoryConductorClient
from vtapi.core.config import get_settings
from vtapi.main import create_app
from vtapi.schemas.conductor import CloudConfig, ConductorJob, Node, NodeProduct

_SERVER = NodeProduct.SERVER.value


class _InventoryFailingClient(InMemoryConductorClient):
    def get_nodes(self) -> list[Node]:
        raise ConductorClientError("node inventory unavailable")


class _SubmitFailingClient(InMemoryConductorClient):
    def create_job(self, job: ConductorJob) -> ConductorJob:
        raise ConductorClientError("job submission rejected")


class _SettingsEnvCase(unittest.TestCase):
    _env = {
        "VTAPI_ELEMENTAL_CONDUCTOR_HOST": "https://conductor.example.com",
        "VTAPI_ELEMENTAL_CONDUCTOR_USER_LOGIN": "myuser",
        "VTAPI_ELEMENTAL_CONDUCTOR_API_KEY": "elemental-api-key",
        "VTAPI_ELEMENTAL_CONDUCTOR_AUTH_EXPIRES": "30",
        "VTAPI_ELEMENTAL_CONDUCTOR_DESTINATION": "s3://destination",
        "VTAPI_AWS_ACCESS_KEY_ID": "aws-access-key",
        "VTAPI_AWS_SECRET_ACCESS_KEY": "aws-secret-key",
    }

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env}
        os.environ.update(self._env)
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


def _healthy_client() -> InMemoryConductorClient:
    return InMemoryConductorClient(
        nodes=[Node(product=_SERVER, status="active"), Node(product=_SERVER, status="active")],
        cloud_config=CloudConfig(min_nodes=2),
    )


def _job_payload(**overrides) -> dict:
    payload = {
        "source": "http://some.nice/video.mov",
        "presets": [
            {
                "name": "mp4_720p",
                "provider_mapping": {"elementalconductor": "mp4_720p"},
                "output_opts": {"extension": "mp4"},
            },
            {
                "name": "hls_360p",
                "provider_mapping": {"elementalconductor": "hls_360p"},
                "output_opts": {"extension": "m3u8"},
            },
        ],
        "streaming_params": {"protocol": "hls", "segment_duration": 3},
    }
    payload.update(overrides)
    return payload


class JobApiTests(_SettingsEnvCase):
    def test_create_job_submits_to_conductor(self) -> None:
        conductor = _healthy_client()
        client = TestClient(create_app(conductor))

        response = client.post("/api/v1/jobs", json=_job_payload())

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["provider_name"], "elementalconductor")
        self.assertEqual(body["status"], "queued")
        submitted = conductor.jobs[body["provider_job_id"]]
        self.assertEqual(
            [group.type.value for group in submitted.output_groups],
            ["apple_live_group_settings", "file_group_settings"],
        )
        self.assertEqual(submitted.output_groups[0].destination.uri, f"s3://destination/{body['id']}/video")

    def test_create_job_with_unmapped_preset_returns_400(self) -> None:
        conductor = _healthy_client()
        client = TestClient(create_app(conductor))
        payload = _job_payload(
            presets=[{"name": "webm_720p", "provider_mapping": {"other": "x"}, "output_opts": {"extension": "webm"}}]
        )

        response = client.post("/api/v1/jobs", json=payload)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["code"], "PRESET_MAP_NOT_FOUND")
        self.assertEqual(response.json()["details"]["preset_name"], "webm_720p")
        self.assertEqual(conductor.jobs, {})

    def test_create_job_on_unhealthy_cluster_returns_503(self) -> None:
        conductor = InMemoryConductorClient(
            nodes=[Node(product=NodeProduct.CONDUCTOR_FILE.value, status="active"), Node(product=_SERVER, status="active")],
            cloud_config=CloudConfig(min_nodes=3),
        )
        client = TestClient(create_app(conductor))

        response = client.post("/api/v1/jobs", json=_job_payload())

        self.assertEqual(response.status_code, 503)
        self.assertEqual(
            response.json(),
            {
                "code": "PROVIDER_UNHEALTHY",
                "message": "there are not enough active nodes. 3 nodes required to be active, but found only 1",
                "details": {"required": 3, "found": 1},
            },
        )
        self.assertEqual(conductor.jobs, {})

    def test_create_job_for_unknown_provider_returns_404(self) -> None:
        client = TestClient(create_app(_healthy_client()))

        response = client.post("/api/v1/jobs", json=_job_payload(provider="zencoder"))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"code": "PROVIDER_NOT_FOUND", "message": "Provider not found"})

    def test_create_job_without_provider_config_returns_500(self) -> None:
        os.environ["VTAPI_ELEMENTAL_CONDUCTOR_API_KEY"] = ""
        get_settings.cache_clear()
        client = TestClient(create_app(_healthy_client()))

        response = client.post("/api/v1/jobs", json=_job_payload())

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["code"], "PROVIDER_CONFIG_INVALID")

    def test_get_job_status_returns_canonical_status(self) -> None:
        conductor = _healthy_client()
        client = TestClient(create_app(conductor))
        created = client.post("/api/v1/jobs", json=_job_payload()).json()
        provider_job_id = created["provider_job_id"]
        conductor.jobs[provider_job_id] = conductor.jobs[provider_job_id].model_copy(
            update={"status": "running", "percent_complete": 42}
        )

        response = client.get(f"/api/v1/jobs/{provider_job_id}")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "started")
        self.assertEqual(body["progress"], 42.0)
        self.assertEqual(body["provider_status"]["status"], "running")
        self.assertEqual(body["output_destination"], f"s3://destination/{created['id']}")

    def test_get_missing_job_returns_502(self) -> None:
        client = TestClient(create_app(_healthy_client()))

        response = client.get("/api/v1/jobs/404")

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["code"], "PROVIDER_REQUEST_FAILED")

    def test_create_job_when_inventory_fetch_fails_returns_502(self) -> None:
        conductor = _InventoryFailingClient(cloud_config=CloudConfig(min_nodes=1))
        client = TestClient(create_app(conductor))

        response = client.post("/api/v1/jobs", json=_job_payload())

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["code"], "PROVIDER_REQUEST_FAILED")
        self.assertEqual(response.json()["details"], {"reason": "node inventory unavailable"})
        self.assertEqual(conductor.jobs, {})

    def test_create_job_when_submission_fails_returns_502(self) -> None:
        conductor = _SubmitFailingClient(
            nodes=[Node(product=_SERVER, status="active")],
            cloud_config=CloudConfig(min_nodes=1),
        )
        client = TestClient(create_app(conductor))

        response = client.post("/api/v1/jobs", json=_job_payload())

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["code"], "PROVIDER_REQUEST_FAILED")
        self.assertEqual(response.json()["details"], {"reason": "job submission rejected"})

    def test_create_job_with_malformed_source_returns_provider_job_id(self) -> None:
        conductor = _healthy_client()
        client = TestClient(create_app(conductor))

        response = client.post("/api/v1/jobs", json=_job_payload(source="http://media.example.com:99999/video.mov"))

        self.assertEqual(response.status_code, 201)
        self.assertIn(response.json()["provider_job_id"], conductor.jobs)

    def test_create_job_with_duplicate_preset_names_returns_422(self) -> None:
        conductor = _healthy_client()
        client = TestClient(create_app(conductor))
        preset = {
            "name": "mp4_720p",
            "provider_mapping": {"elementalconductor": "mp4_720p"},
            "output_opts": {"extension": "mp4"},
        }

        response = client.post("/api/v1/jobs", json=_job_payload(presets=[preset, dict(preset)]))

        self.assertEqual(response.status_code, 422)
        self.assertEqual(conductor.jobs, {})

    def test_cancel_job_returns_updated_status(self) -> None:
        conductor = _healthy_client()
        client = TestClient(create_app(conductor))
        created = client.post("/api/v1/jobs", json=_job_payload()).json()

        response = client.post(
            f"/api/v1/jobs/{created['provider_job_id']}/cancel",
            headers={"X-Correlation-Id": "corr-1"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "canceled")
        self.assertEqual(conductor.canceled_jobs, [created["provider_job_id"]])


class ProviderApiTests(_SettingsEnvCase):
    def test_list_providers(self) -> None:
        client = TestClient(create_app(_healthy_client()))

        response = client.get("/api/v1/providers")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), ["elementalconductor"])

    def test_describe_healthy_provider(self) -> None:
        client = TestClient(create_app(_healthy_client()))

        response = client.get("/api/v1/providers/elementalconductor")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "name": "elementalconductor",
                "capabilities": {
                    "input_formats": ["prores", "h264"],
                    "output_formats": ["mp4", "hls"],
                    "destinations": ["akamai", "s3"],
                },
                "health": {"status": "ok", "message": None},
            },
        )

    def test_describe_unhealthy_provider_reports_reason(self) -> None:
        conductor = InMemoryConductorClient(cloud_config=CloudConfig(min_nodes=1))
        client = TestClient(create_app(conductor))

        response = client.get("/api/v1/providers/elementalconductor")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["health"],
            {
                "status": "unhealthy",
                "message": "there are not enough active nodes. 1 nodes required to be active, but found only 0",
            },
        )

    def test_describe_provider_when_inventory_fetch_fails_reports_unhealthy(self) -> None:
        client = TestClient(create_app(_InventoryFailingClient(cloud_config=CloudConfig(min_nodes=1))))

        response = client.get("/api/v1/providers/elementalconductor")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["health"],
            {"status": "unhealthy", "message": "node inventory unavailable"},
        )

    def test_describe_unknown_provider_returns_404(self) -> None:
        client = TestClient(create_app(_healthy_client()))

        response = client.get("/api/v1/providers/zencoder")

        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
