"""
API tests for ``create_bridge_app()``.

Each test builds the full FastAPI app around a real bridge pointed at a
temporary bundle and calls it through ``TestClient``.
"""

import inspect
import threading

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from mi_music_bridge import create_bridge_app
from mi_music_bridge.bridges.android import AndroidBridge
from mi_music_bridge.bridges.ios import IOSBridge
from mi_music_bridge.channel import ChannelRegistry, MethodResult
from mi_music_bridge.platform.context import BridgeContext

from conftest import write_plist, write_properties

CHANNEL_URL = "/channels/cn.jokeo.mi_music/umeng_config"


@pytest.fixture
def android_client(context):
    return TestClient(create_bridge_app(AndroidBridge(context)))


@pytest.fixture
def ios_client(context):
    return TestClient(create_bridge_app(IOSBridge(context)))


class TestChannelEndpoint:
    """POST /channels/{name} response shapes."""

    def test_absent_config_android(self, android_client):
        resp = android_client.post(CHANNEL_URL, json={"method": "getUmengConfig"})
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "success",
            "result": {"appKey": "", "channel": ""},
        }

    def test_absent_config_ios(self, ios_client):
        resp = ios_client.post(CHANNEL_URL, json={"method": "getUmengConfig"})
        assert resp.status_code == 200
        assert resp.json()["result"] == {"appKey": "", "channel": ""}

    def test_present_config_android(self, android_client, bundle):
        write_properties(bundle, "umeng.appkey=ABC123\numeng.channel=play_store\n")
        resp = android_client.post(CHANNEL_URL, json={"method": "getUmengConfig"})
        assert resp.json()["result"] == {"appKey": "ABC123", "channel": "play_store"}

    def test_present_config_ios(self, ios_client, bundle):
        write_plist(bundle, {"UMAppKey": "ABC123", "UMChannel": "play_store"})
        resp = ios_client.post(CHANNEL_URL, json={"method": "getUmengConfig"})
        assert resp.json()["result"] == {"appKey": "ABC123", "channel": "play_store"}

    def test_malformed_config_is_empty_pair(self, android_client, bundle):
        write_properties(bundle, "umeng.appkey=\\u12\n")
        resp = android_client.post(CHANNEL_URL, json={"method": "getUmengConfig"})
        assert resp.status_code == 200
        assert resp.json()["result"] == {"appKey": "", "channel": ""}

    def test_repeated_calls_identical(self, ios_client, bundle):
        write_plist(bundle, {"UMAppKey": "ABC123"})
        bodies = [
            ios_client.post(CHANNEL_URL, json={"method": "getUmengConfig"}).json()
            for _ in range(3)
        ]
        assert bodies[0] == bodies[1] == bodies[2]
        assert bodies[0]["result"] == {"appKey": "ABC123", "channel": ""}

    def test_unknown_method_is_501(self, android_client):
        resp = android_client.post(CHANNEL_URL, json={"method": "setUmengConfig"})
        assert resp.status_code == 501
        assert resp.json() == {"status": "notImplemented", "method": "setUmengConfig"}
        assert "result" not in resp.json()

    def test_unknown_channel_is_404(self, android_client):
        resp = android_client.post("/channels/cn.jokeo.mi_music/other", json={"method": "x"})
        assert resp.status_code == 404

    def test_missing_method_is_422(self, android_client):
        resp = android_client.post(CHANNEL_URL, json={"arguments": {}})
        assert resp.status_code == 422

    def test_handler_error_is_500(self, context):
        registry = ChannelRegistry()
        app = create_bridge_app(AndroidBridge(context), registry=registry)

        def boom(call):
            raise RuntimeError("kaput")

        registry.channel("test/boom").set_method_call_handler(boom)
        resp = TestClient(app).post("/channels/test/boom", json={"method": "x"})
        assert resp.status_code == 500
        assert resp.json()["status"] == "error"
        assert resp.json()["message"] == "kaput"

    def test_extra_channels_in_shared_registry(self, context):
        registry = ChannelRegistry()
        registry.channel("test/echo").set_method_call_handler(
            lambda call: MethodResult.success(call.arguments)
        )
        app = create_bridge_app(AndroidBridge(context), registry=registry)
        resp = TestClient(app).post(
            "/channels/test/echo", json={"method": "echo", "arguments": [1, 2]}
        )
        assert resp.json() == {"status": "success", "result": [1, 2]}


class TestHealthAndCapabilities:
    """GET /health and GET /capabilities."""

    def test_health(self, android_client):
        resp = android_client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "platform": "android"}

    def test_capabilities_android(self, android_client, bundle):
        data = android_client.get("/capabilities").json()
        assert data["platform"] == "android"
        assert data["resource_name"] == "umeng_config.properties"
        assert data["resource_path"] == str(bundle / "assets" / "umeng_config.properties")
        assert data["keys"] == {"appKey": "umeng.appkey", "channel": "umeng.channel"}
        assert data["channels"] == ["cn.jokeo.mi_music/umeng_config"]
        assert data["bundle_path"] == str(bundle)

    def test_capabilities_ios(self, ios_client):
        data = ios_client.get("/capabilities").json()
        assert data["platform"] == "ios"
        assert data["keys"] == {"appKey": "UMAppKey", "channel": "UMChannel"}

    def test_capabilities_disabled(self, context):
        app = create_bridge_app(AndroidBridge(context), enable_capabilities=False)
        assert TestClient(app).get("/capabilities").status_code == 404


class TestCreateBridgeApp:
    """App factory wiring."""

    def test_returns_fastapi(self, context):
        assert isinstance(create_bridge_app(AndroidBridge(context)), FastAPI)

    def test_context_from_env_when_missing(self, bundle, monkeypatch):
        monkeypatch.setenv("BUNDLE_PATH", str(bundle))
        bridge = IOSBridge()
        create_bridge_app(bridge)
        assert isinstance(bridge.context, BridgeContext)
        assert bridge.context.bundle_path == str(bundle)

    def test_existing_context_kept(self, context):
        bridge = AndroidBridge(context)
        create_bridge_app(bridge)
        assert bridge.context is context

    def test_lifespan_runs(self, context):
        app = create_bridge_app(AndroidBridge(context))
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200


class TestChannelRouteExecution:
    """The channel route is a plain def so its config read runs in the threadpool."""

    def test_route_is_sync_function(self):
        from mi_music_bridge.endpoints.channels import invoke_channel

        assert not inspect.iscoroutinefunction(invoke_channel)

    def test_route_reads_config_once_per_call(self, context, bundle, monkeypatch):
        write_properties(bundle, "umeng.appkey=ABC123\n")
        bridge = AndroidBridge(context)
        threads = []
        original = bridge.load_config

        def recording_load():
            threads.append(threading.get_ident())
            return original()

        monkeypatch.setattr(bridge, "load_config", recording_load)
        client = TestClient(create_bridge_app(bridge))
        resp = client.post(CHANNEL_URL, json={"method": "getUmengConfig"})

        assert resp.json()["result"]["appKey"] == "ABC123"
        assert len(threads) == 1
