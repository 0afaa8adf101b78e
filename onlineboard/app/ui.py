from html import escape
from .config import Settings
from .models import AggregateResult, ServerStatus, Tier

STYLE = """
body{font-family:'Roboto',Arial,sans-serif;background:linear-gradient(135deg,#e0e7ff 0%,#ffffff 100%);min-height:100vh}
.navbar-brand{display:flex;align-items:center;gap:.5rem;font-weight:700;letter-spacing:1px}
.table-container{width:95%;max-width:800px;margin:32px auto 0 auto;background:#fff;box-shadow:0 4px 6px rgba(0,0,0,.08);border-radius:8px;padding:16px}
table{width:100%;border-collapse:collapse;background:#fff}
th,td{border:1px solid #ececec;padding:10px;text-align:left}
th{background-color:#f2f2f2}
.online{color:#00C853;font-weight:bold}
.online-warning{color:#FFD600;font-weight:bold}
.online-danger{color:#D32F2F;font-weight:bold}
.offline{color:#d32f2f;font-weight:bold}
.total-users{text-align:center;margin-top:16px;margin-bottom:20px;font-weight:bold;font-size:1.1rem}
.status-dot{display:inline-block;width:12px;height:12px;border-radius:50%;margin-right:6px;vertical-align:middle}
.dot-green{background:#00C853}.dot-yellow{background:#FFD600}.dot-red{background:#D32F2F}
.tier-badge{background:transparent;border:1px solid #ececec;font-size:.85em}
@media (max-width:600px){.table-container{padding:5px}th,td{font-size:.91rem}}
"""

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"
BOOTSTRAP_JS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/js/bootstrap.bundle.min.js"

# tier -> (text class, dot class)
TIER_CLASSES = {
    Tier.NORMAL: ("online", "dot-green"),
    Tier.BUSY: ("online-warning", "dot-yellow"),
    Tier.HIGH_LOAD: ("online-danger", "dot-red"),
    Tier.OFFLINE: ("offline", "dot-red"),
}


def render_row(s: ServerStatus) -> str:
    label = escape(s.label)
    if not s.reachable:
        return (f"<tr><td>{label}</td><td class='offline'>"
                f"<span class='status-dot dot-red'></span>Unable to connect</td></tr>")
    cls, dot = TIER_CLASSES[s.tier]
    return (f"<tr><td>{label}</td><td class='{cls}'>"
            f"<span class='status-dot {dot}'></span>"
            f"Online {s.online_count} people"
            f"<span class='badge rounded-pill ms-2 tier-badge {cls}'>{s.tier.value}</span>"
            f"</td></tr>")


def render_total(result: AggregateResult) -> str:
    cls, dot = TIER_CLASSES[result.total_tier]
    return (f"<div class='total-users'>Total online users: "
            f"<span class='{cls}'><span class='status-dot {dot}'></span>"
            f"{result.total_online_count}</span> people</div>")


def render_page(result: AggregateResult, settings: Settings) -> str:
    title = escape(settings.SITE_TITLE)
    logo = ""
    if settings.LOGO_URL:
        logo = f'<img src="{escape(settings.LOGO_URL)}" alt="{title} Logo" style="width:36px;height:auto;">'
    rows = "\n".join(render_row(s) for s in result.servers)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title} Online Users</title>
<link href="{BOOTSTRAP_CSS}" rel="stylesheet">
<style>{STYLE}</style>
</head>
<body>
<nav class="navbar navbar-expand-lg navbar-light bg-white shadow-sm">
  <div class="container"><a class="navbar-brand" href="/">{logo}{title}</a></div>
</nav>
<h3 class="mt-4 text-center">{title} Server Status</h3>
<div class="table-container">
<table>
<tr><th>Server Name</th><th>Status</th></tr>
{rows}
</table>
{render_total(result)}
<div class="text-center text-muted small">Checked at {result.checked_at.strftime('%Y-%m-%d %H:%M:%S %Z')}</div>
</div>
<script src="{BOOTSTRAP_JS}"></script>
</body>
</html>
"""
