"""Test the command line interface."""

from unittest.mock import patch

from typer.testing import CliRunner

from kubedump import __version__
from kubedump.cli.main import app
from kubedump.k8s.client import K8sClientError
from conftest import build_cluster_client

runner = CliRunner()


class TestDumpCommand:
    def test_dump_writes_files_and_reports(self, two_group_cluster, tmp_path):
        client = build_cluster_client(two_group_cluster)

        with patch("kubedump.cli.main.K8sClient", return_value=client) as client_cls:
            result = runner.invoke(
                app, ["dump", "--dir", str(tmp_path), "--context", "staging", "--threads", "2"]
            )

        assert result.exit_code == 0, result.output
        assert "loaded 2 manifests" in result.output
        client_cls.assert_called_once_with(kubeconfig=None, context="staging")
        assert (tmp_path / "clusterscoped" / "namespaces" / "team-a.yaml").exists()

    def test_env_vars_are_used(self, two_group_cluster, tmp_path):
        client = build_cluster_client(two_group_cluster)

        with patch("kubedump.cli.main.K8sClient", return_value=client):
            result = runner.invoke(
                app,
                ["dump", "--no-clusterscoped"],
                env={"DIR": str(tmp_path), "RESOURCES": "Namespaces,Deployments"},
            )

        assert result.exit_code == 0, result.output
        assert not (tmp_path / "clusterscoped").exists()
        assert (tmp_path / "namespaced" / "team-a" / "deployments.apps" / "web.yaml").exists()

    def test_verbosity_zero_is_quiet(self, two_group_cluster, tmp_path):
        client = build_cluster_client(two_group_cluster)

        with patch("kubedump.cli.main.K8sClient", return_value=client):
            result = runner.invoke(app, ["dump", "--dir", str(tmp_path), "--verbosity", "0"])

        assert result.exit_code == 0
        assert "loaded" not in result.output

    def test_verbosity_two_prints_version(self, two_group_cluster, tmp_path):
        client = build_cluster_client(two_group_cluster)

        with patch("kubedump.cli.main.K8sClient", return_value=client):
            result = runner.invoke(app, ["dump", "--dir", str(tmp_path), "-v", "2"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbosity_above_three_is_rejected(self, tmp_path):
        with patch("kubedump.cli.main.K8sClient") as client_cls:
            result = runner.invoke(app, ["dump", "--dir", str(tmp_path), "--verbosity", "4"])

        assert result.exit_code == 2
        client_cls.assert_not_called()

    def test_zero_threads_is_fatal(self, tmp_path):
        with patch("kubedump.cli.main.K8sClient") as client_cls:
            result = runner.invoke(app, ["dump", "--dir", str(tmp_path), "--threads", "0"])

        assert result.exit_code == 1
        assert "minimum number of threads is 1" in result.output
        client_cls.assert_not_called()

    def test_discovery_failure_is_fatal(self, tmp_path):
        client = build_cluster_client({})
        client.get_server_groups.side_effect = K8sClientError("/api", "Unable to connect to the server")

        with patch("kubedump.cli.main.K8sClient", return_value=client):
            result = runner.invoke(app, ["dump", "--dir", str(tmp_path)])

        assert result.exit_code == 1
        assert "Unable to connect to the server" in result.output

    def test_missing_kubectl_is_fatal(self, tmp_path):
        with patch(
            "kubedump.cli.main.K8sClient",
            side_effect=RuntimeError("kubectl command not found. Please install kubectl."),
        ):
            result = runner.invoke(app, ["dump", "--dir", str(tmp_path)])

        assert result.exit_code == 1
        assert "kubectl command not found" in result.output

    def test_partial_failure_still_succeeds(self, two_group_cluster, tmp_path):
        client = build_cluster_client(two_group_cluster, failing=("deployments",))

        with patch("kubedump.cli.main.K8sClient", return_value=client):
            result = runner.invoke(app, ["dump", "--dir", str(tmp_path)])

        assert result.exit_code == 0
        assert "loaded 1 manifests" in result.output


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
