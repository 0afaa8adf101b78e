import asyncio

from onlineboard.app import snapshot
from onlineboard.app.aggregator import summarize
from onlineboard.app.models import ServerEntry, ServerStatus, Tier
from onlineboard.app.snapshot import format_snapshot, main, take_snapshot

A = "http://a.test/server/online"
B = "http://b.test/server/online"


def test_format_snapshot():
    a, b = ServerEntry("TH-01", A), ServerEntry("TH-02", B)
    result = summarize([
        ServerStatus.online(a, 250, Tier.BUSY, raw="250"),
        ServerStatus.offline(b, "HTTP 502"),
    ])
    lines = format_snapshot(result).splitlines()
    assert lines[0].startswith("Server")
    assert "Online 250 people (Busy)" in lines[1]
    assert "Unable to connect (HTTP 502)" in lines[2]
    assert lines[-1] == "Total online users: 250 people (Normal)"


def test_take_snapshot_uses_transport(transport_for):
    result = asyncio.run(take_snapshot([ServerEntry("TH-01", A)], "checker/1",
                                       transport=transport_for({A: "301"})))
    assert result.servers[0].tier == Tier.HIGH_LOAD
    assert result.total_online_count == 301


def test_main_rejects_bad_config(servers_file, capsys):
    path = servers_file("servers:\n")
    assert main([str(path)]) == 2
    assert "Invalid server list" in capsys.readouterr().err


def test_main_prints_snapshot(servers_file, transport_for, monkeypatch, capsys):
    path = servers_file(f"""
servers:
  - name: "TH-01"
    url: "{A}"
  - name: "TH-02"
    url: "{B}"
""")
    real = snapshot.take_snapshot

    def fake(servers, user_agent):
        return real(servers, user_agent, transport=transport_for({A: "120"}))

    monkeypatch.setattr(snapshot, "take_snapshot", fake)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert "TH-01" in lines[1] and "Online 120 people (Normal)" in lines[1]
    assert "TH-02" in lines[2] and "Unable to connect" in lines[2]
    assert lines[3] == "Total online users: 120 people (Normal)"
