import json

import pytest

from flavor_mapper.cli import main


@pytest.fixture
def catalog(tmp_path):
    path = tmp_path / "flavors.json"
    path.write_text(json.dumps([
        {"Name": "diskless", "VCPUs": 1, "RAM": 2048, "Disk": 0, "Ephemeral": 0},
        {"Name": "m1.small", "VCPUs": 1, "RAM": 2048, "Disk": 20, "Ephemeral": 0},
    ]))
    return str(path)


def test_prints_cloud_properties(catalog, capsys):
    rc = main(["--flavors", catalog, "--cpu", "1", "--ram", "1024",
               "--ephemeral-disk-size", "3072"])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"instance_type": "m1.small"}


def test_boot_from_volume(catalog, capsys):
    rc = main(["--flavors", catalog, "--cpu", "1", "--ram", "1024",
               "--ephemeral-disk-size", "3072", "--boot-from-volume"])

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {
        "instance_type": "diskless",
        "root_disk": {"size": 6.0},
    }


def test_no_matching_flavor(catalog, capsys, caplog):
    rc = main(["--flavors", catalog, "--cpu", "4", "--ram", "1024"])

    assert rc == 1
    assert capsys.readouterr().out == ""
    assert "Available flavors:" in caplog.text
    assert "diskless: 1 CPU, 2048 MB RAM, 0 GB Disk" in caplog.text


def test_unreadable_catalog(tmp_path, caplog):
    rc = main(["--flavors", str(tmp_path / "missing.json"), "--cpu", "1", "--ram", "512"])

    assert rc == 1
    assert "Cannot read flavor catalog" in caplog.text


@pytest.mark.parametrize("records", [
    [{"Name": "x", "VCPUs": "two", "RAM": 512, "Disk": 1, "Ephemeral": 0}],
    [5],
])
def test_malformed_catalog_record(tmp_path, caplog, records):
    path = tmp_path / "flavors.json"
    path.write_text(json.dumps(records))

    rc = main(["--flavors", str(path), "--cpu", "1", "--ram", "1"])

    assert rc == 1
    assert "Invalid flavor record" in caplog.text or "not an object" in caplog.text


def test_unexpected_error(catalog, caplog, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("flavor_mapper.cli.load_flavor_catalog", explode)

    rc = main(["--flavors", catalog, "--cpu", "1", "--ram", "512"])

    assert rc == 1
    assert "Unexpected error: boom" in caplog.text
