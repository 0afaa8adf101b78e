import pytest

from onlineboard.app.config import DEFAULT_SERVERS_PATH
from onlineboard.app.endpoints import ConfigError, load_servers
from onlineboard.app.models import ServerEntry


class TestLoadServers:
    def test_keeps_file_order_and_duplicates(self, servers_file):
        path = servers_file("""
servers:
  - name: "TH-02"
    url: "http://b.test/server/online"
  - name: "TH-01"
    url: "http://a.test/server/online"
  - name: "TH-01"
    url: "https://c.test/server/online"
""")
        assert load_servers(path) == [
            ServerEntry("TH-02", "http://b.test/server/online"),
            ServerEntry("TH-01", "http://a.test/server/online"),
            ServerEntry("TH-01", "https://c.test/server/online"),
        ]

    def test_default_file_loads(self):
        servers = load_servers(DEFAULT_SERVERS_PATH)
        assert len(servers) == 10
        assert servers[0].endpoint.endswith("/server/online")

    @pytest.mark.parametrize("text", ["", "servers:\n", "servers: []\n", "other: 1\n", "- just a list\n"])
    def test_empty_or_null_server_list_rejected(self, servers_file, text):
        with pytest.raises(ConfigError):
            load_servers(servers_file(text))

    def test_missing_file_rejected(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_servers(tmp_path / "nope.yaml")

    def test_malformed_yaml_rejected(self, servers_file):
        with pytest.raises(ConfigError, match="not valid YAML"):
            load_servers(servers_file("servers: [\n"))

    @pytest.mark.parametrize("entry,message", [
        ('  - url: "http://a.test/"', "missing a name"),
        ('  - name: "A"', "missing a url"),
        ('  - name: "A"\n    url: "ftp://a.test/"', "invalid url"),
        ('  - name: "A"\n    url: "not a url"', "invalid url"),
        ('  - "http://a.test/"', "must be a mapping"),
    ])
    def test_bad_entries_rejected(self, servers_file, entry, message):
        with pytest.raises(ConfigError, match=message):
            load_servers(servers_file("servers:\n" + entry + "\n"))

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
