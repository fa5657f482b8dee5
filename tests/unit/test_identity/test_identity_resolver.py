"""
Unit tests for container identity resolution.

Covers the lookup chain (location label, location env, direct label,
direct env), the defaults and the trim prefixes.
"""

import pytest

from collectd_docker.identity.resolver import IdentityResolver, extract_env, trim_prefix
from collectd_docker.models.config import MonitorConfig
from collectd_docker.models.container import DEFAULT_TASK, Identity


@pytest.fixture
def resolver():
    return IdentityResolver(MonitorConfig())


@pytest.mark.unit
class TestEnvHelpers:
    """Test cases for env entry lookup."""

    def test_extract_env_first_match_wins(self):
        env = ["PATH=/bin", "MARATHON_APP_ID=/a/b", "MARATHON_APP_ID=/c"]
        assert extract_env(env, "MARATHON_APP_ID") == "/a/b"

    def test_extract_env_requires_full_key(self):
        assert extract_env(["MARATHON_APP_ID_EXTRA=x"], "MARATHON_APP_ID") == ""

    def test_extract_env_keeps_equals_in_value(self):
        assert extract_env(["OPTS=a=b"], "OPTS") == "a=b"

    def test_extract_env_missing(self):
        assert extract_env([], "ANY") == ""

    def test_trim_prefix(self):
        assert trim_prefix("/prod/web", "/prod") == "/web"
        assert trim_prefix("/prod/prod/web", "/prod") == "/prod/web"
        assert trim_prefix("/web", "/prod") == "/web"
        assert trim_prefix("/web", "") == "/web"


@pytest.mark.unit
class TestAppResolution:
    """Test cases for resolving the app identity."""

    def test_direct_label(self, resolver, container_factory):
        container = container_factory(labels={"app_id": "/infra/web/api"})
        assert resolver.resolve_app(container) == "/infra/web/api"

    def test_direct_env(self, resolver, container_factory):
        container = container_factory(env=["MARATHON_APP_ID=/infra/web/api"])
        assert resolver.resolve_app(container) == "/infra/web/api"

    def test_direct_label_wins_over_direct_env(self, resolver, container_factory):
        container = container_factory(
            labels={"app_id": "from-label"},
            env=["MARATHON_APP_ID=from-env"],
        )
        assert resolver.resolve_app(container) == "from-label"

    def test_location_label_wins_over_direct_label(self, resolver, container_factory):
        container = container_factory(labels={
            "collectd_docker_app_label": "service",
            "service": "svc-42",
            "app_id": "other",
        })
        assert resolver.resolve_app(container) == "svc-42"

    def test_location_env(self, resolver, container_factory):
        container = container_factory(env=[
            "COLLECTD_DOCKER_APP_ENV=SERVICE_NAME",
            "SERVICE_NAME=billing",
            "MARATHON_APP_ID=/other",
        ])
        assert resolver.resolve_app(container) == "billing"

    def test_location_label_wins_over_location_env(self, resolver, container_factory):
        container = container_factory(
            labels={"collectd_docker_app_label": "service", "service": "from-label"},
            env=["COLLECTD_DOCKER_APP_ENV=SERVICE_NAME", "SERVICE_NAME=from-env"],
        )
        assert resolver.resolve_app(container) == "from-label"

    def test_location_label_pointing_at_missing_label_falls_through(self, resolver, container_factory):
        container = container_factory(labels={
            "collectd_docker_app_label": "missing",
            "app_id": "direct",
        })
        assert resolver.resolve_app(container) == "direct"

    def test_missing_location_label_falls_through_to_location_env(self, resolver, container_factory):
        container = container_factory(
            labels={"collectd_docker_app_label": "missing"},
            env=["COLLECTD_DOCKER_APP_ENV=SERVICE_NAME", "SERVICE_NAME=from-env"],
        )
        assert resolver.resolve_app(container) == "from-env"

    def test_location_env_pointing_at_missing_env_falls_through(self, resolver, container_factory):
        container = container_factory(env=[
            "COLLECTD_DOCKER_APP_ENV=MISSING",
            "MARATHON_APP_ID=/direct",
        ])
        assert resolver.resolve_app(container) == "/direct"

    def test_empty_direct_label_falls_through_to_env(self, resolver, container_factory):
        container = container_factory(labels={"app_id": ""}, env=["MARATHON_APP_ID=/env"])
        assert resolver.resolve_app(container) == "/env"

    def test_nothing_found_is_empty(self, resolver, container_factory):
        container = container_factory(labels={"other": "x"}, env=["PATH=/bin"])
        assert resolver.resolve_app(container) == ""

    def test_trim_prefix(self, resolver, container_factory):
        container = container_factory(env=[
            "MARATHON_APP_ID=/prod/infra/web",
            "COLLECTD_DOCKER_APP_ENV_TRIM_PREFIX=/prod",
        ])
        assert resolver.resolve_app(container) == "/infra/web"

    def test_trim_prefix_not_matching(self, resolver, container_factory):
        container = container_factory(env=[
            "MARATHON_APP_ID=/infra/web",
            "COLLECTD_DOCKER_APP_ENV_TRIM_PREFIX=/prod",
        ])
        assert resolver.resolve_app(container) == "/infra/web"

    def test_task_trim_prefix_does_not_apply_to_app(self, resolver, container_factory):
        container = container_factory(env=[
            "MARATHON_APP_ID=/prod/web",
            "COLLECTD_DOCKER_TASK_ENV_TRIM_PREFIX=/prod",
        ])
        assert resolver.resolve_app(container) == "/prod/web"

    def test_configured_keys(self, container_factory):
        resolver = IdentityResolver(MonitorConfig(app_label="com.example.app", app_env_key="APP"))
        assert resolver.resolve_app(container_factory(labels={"com.example.app": "a"})) == "a"
        assert resolver.resolve_app(container_factory(env=["APP=b"])) == "b"
        assert resolver.resolve_app(container_factory(labels={"app_id": "c"})) == ""


@pytest.mark.unit
class TestTaskResolution:
    """Test cases for resolving the task identity."""

    def test_default_when_missing(self, resolver, container_factory):
        assert resolver.resolve_task(container_factory()) == DEFAULT_TASK

    def test_direct_label(self, resolver, container_factory):
        container = container_factory(labels={"collectd_docker_task": "worker-7.canary"})
        assert resolver.resolve_task(container) == "worker-7.canary"

    def test_direct_env(self, resolver, container_factory):
        container = container_factory(env=["MESOS_TASK_ID=web.1234"])
        assert resolver.resolve_task(container) == "web.1234"

    def test_location_label(self, resolver, container_factory):
        container = container_factory(labels={
            "collectd_docker_task_label": "instance",
            "instance": "api-3",
            "collectd_docker_task": "other",
        })
        assert resolver.resolve_task(container) == "api-3"

    def test_location_env(self, resolver, container_factory):
        container = container_factory(env=[
            "COLLECTD_DOCKER_TASK_ENV=HOSTNAME",
            "HOSTNAME=node-1",
        ])
        assert resolver.resolve_task(container) == "node-1"

    def test_trim_prefix(self, resolver, container_factory):
        container = container_factory(env=[
            "MESOS_TASK_ID=prod_web.1234",
            "COLLECTD_DOCKER_TASK_ENV_TRIM_PREFIX=prod_",
        ])
        assert resolver.resolve_task(container) == "web.1234"

    def test_location_label_pointing_at_missing_label_falls_through(self, resolver, container_factory):
        container = container_factory(labels={
            "collectd_docker_task_label": "missing",
            "collectd_docker_task": "direct",
        })
        assert resolver.resolve_task(container) == "direct"

    def test_location_env_pointing_at_missing_env_falls_through(self, resolver, container_factory):
        container = container_factory(env=[
            "COLLECTD_DOCKER_TASK_ENV=MISSING",
            "MESOS_TASK_ID=web.1",
        ])
        assert resolver.resolve_task(container) == "web.1"

    def test_missing_location_targets_fall_back_to_default(self, resolver, container_factory):
        container = container_factory(
            labels={"collectd_docker_task_label": "missing"},
            env=["COLLECTD_DOCKER_TASK_ENV=MISSING"],
        )
        assert resolver.resolve_task(container) == DEFAULT_TASK

    def test_trim_prefix_applies_to_default(self, resolver, container_factory):
        container = container_factory(env=["COLLECTD_DOCKER_TASK_ENV_TRIM_PREFIX=def"])
        assert resolver.resolve_task(container) == "ault"


@pytest.mark.unit
def test_resolve_returns_identity(resolver, container_factory):
    container = container_factory(
        labels={"app_id": "/a/b/c"},
        env=["MESOS_TASK_ID=c.1"],
    )
    assert resolver.resolve(container) == Identity(app="/a/b/c", task="c.1")
    assert resolver.resolve(container).should_monitor
    assert not resolver.resolve(container_factory()).should_monitor
