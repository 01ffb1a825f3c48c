"""Tests for dry_run.py module."""

import io

import pytest
import yaml

from ksops_dry_run.dry_run import render
from ksops_dry_run.environment import PluginEnvironment
from ksops_dry_run.exceptions import (
    ConfigIdentityError,
    MissingConfigError,
    SecretFileError,
    SecretIdentityError,
)
from ksops_dry_run.secrets.redaction import DRY_RUN_LABEL, PLACEHOLDER


def secret_doc(name: str, **fields: str) -> str:
    lines = ["apiVersion: v1", "kind: Secret", "metadata:", f"  name: {name}"]
    if fields:
        lines.append("stringData:")
        lines.extend(f"  {key}: '{value}'" for key, value in fields.items())
    return "\n".join(lines) + "\n"


class TestRender:
    """Tests for the dry-run pipeline."""

    def test_single_secret(self, write_file, tmp_path):
        """Test the basic scenario of one file holding one secret."""
        write_file("a.yaml", secret_doc("token", TOKEN="abc"))
        environment = PluginEnvironment(
            dry_run=True,
            config_string="apiVersion: viaduct.ai/v1\nkind: ksops\nfiles: [a.yaml]\n",
            config_root=str(tmp_path),
        )
        stream = io.StringIO()

        assert render(environment, stream) == 1

        documents = list(yaml.safe_load_all(stream.getvalue()))
        assert documents == [
            {
                "apiVersion": "v1",
                "kind": "Secret",
                "metadata": {"labels": {DRY_RUN_LABEL: "true"}, "name": "token"},
                "stringData": {"TOKEN": PLACEHOLDER},
            }
        ]

    def test_file_and_document_order(self, write_file, tmp_path, sample_generator_yaml):
        """Test output follows config file order, then document order."""
        write_file("first.enc.yaml", secret_doc("a") + "---\n" + secret_doc("b"))
        write_file("nested/second.enc.yaml", secret_doc("c"))
        environment = PluginEnvironment(dry_run=True, config_string=sample_generator_yaml, config_root=str(tmp_path))
        stream = io.StringIO()

        assert render(environment, stream) == 3

        names = [doc["metadata"]["name"] for doc in yaml.safe_load_all(stream.getvalue())]
        assert names == ["a", "b", "c"]

    def test_empty_file_list(self, tmp_path):
        """Test a config without files renders nothing."""
        environment = PluginEnvironment(
            dry_run=True,
            config_string="apiVersion: viaduct.ai/v1\nkind: ksops\n",
            config_root=str(tmp_path),
        )
        stream = io.StringIO()

        assert render(environment, stream) == 0
        assert stream.getvalue() == ""

    def test_missing_config_string(self, tmp_path):
        """Test a missing config string raises MissingConfigError."""
        with pytest.raises(MissingConfigError) as exc_info:
            render(PluginEnvironment(dry_run=True, config_root=str(tmp_path)), io.StringIO())

        assert exc_info.value.variable == "KUSTOMIZE_PLUGIN_CONFIG_STRING"

    def test_missing_config_root(self):
        """Test a missing config root raises MissingConfigError before parsing."""
        environment = PluginEnvironment(dry_run=True, config_string="not: [valid")

        with pytest.raises(MissingConfigError) as exc_info:
            render(environment, io.StringIO())

        assert exc_info.value.variable == "KUSTOMIZE_PLUGIN_CONFIG_ROOT"

    def test_wrong_generator(self, tmp_path):
        """Test a config for another generator raises ConfigIdentityError."""
        environment = PluginEnvironment(
            dry_run=True,
            config_string="apiVersion: builtin\nkind: SecretGenerator\n",
            config_root=str(tmp_path),
        )

        with pytest.raises(ConfigIdentityError):
            render(environment, io.StringIO())

    def test_missing_file(self, tmp_path):
        """Test a referenced file that does not exist raises SecretFileError."""
        environment = PluginEnvironment(
            dry_run=True,
            config_string="apiVersion: viaduct.ai/v1\nkind: ksops\nfiles: [missing.yaml]\n",
            config_root=str(tmp_path),
        )

        with pytest.raises(SecretFileError):
            render(environment, io.StringIO())

    def test_earlier_files_are_streamed(self, write_file, tmp_path):
        """Test secrets from files before a failing one were already written."""
        write_file("good.yaml", secret_doc("good", KEY="value"))
        write_file("bad.yaml", secret_doc("fine") + "---\napiVersion: v1\nkind: ConfigMap\n")
        environment = PluginEnvironment(
            dry_run=True,
            config_string="apiVersion: viaduct.ai/v1\nkind: ksops\nfiles: [good.yaml, bad.yaml]\n",
            config_root=str(tmp_path),
        )
        stream = io.StringIO()

        with pytest.raises(SecretIdentityError):
            render(environment, stream)

        output = stream.getvalue()
        assert "name: good" in output
        assert "fine" not in output
