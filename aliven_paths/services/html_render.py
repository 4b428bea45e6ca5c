"""HTML renderer — builds the self-contained plan document printed to PDF.

Plain string interpolation; every interpolated value goes through
escape_html, including defaults supplied by the export service.
"""

import base64
import html
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

NO_DATA_HTML = '<p class="muted">No rhythm data provided.</p>'

PRINT_CSS = """
@page { size: A4; margin: 16mm; }

* {
  -webkit-print-color-adjust: exact;
  print-color-adjust: exact;
}

body {
  font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial;
  background: #efe9e1;
  margin: 0;
  color: #111;
}

.page { padding: 28px; }

.card {
  max-width: 760px;
  margin: 0 auto;
  background: #ffffff;
  border-radius: 22px;
  padding: 28px;
  border: 1px solid #e2ddd6;
  box-shadow: 0 10px 28px rgba(0,0,0,.06);
}

.header {
  display: flex;
  justify-content: space-between;
  align-items: center;
  margin-bottom: 18px;
}

.brand {
  font-size: 11px;
  letter-spacing: .18em;
  text-transform: uppercase;
  color: #4b4b4b;
}

.logo { height: 34px; }

h1 {
  margin: 0 0 6px;
  font-size: 22px;
}

.meta {
  font-size: 12px;
  color: #4b4b4b;
  margin-bottom: 18px;
}

.week {
  margin-top: 14px;
  border: 1px solid #e2ddd6;
  border-radius: 18px;
  padding: 14px;
  break-inside: avoid;
}

.week-badge {
  font-size: 11px;
  font-weight: 700;
  padding: 6px 10px;
  border-radius: 999px;
  background: #a4756f1a;
  border: 1px solid #a4756f33;
  display: inline-block;
  margin-bottom: 10px;
}

.label {
  font-size: 11px;
  color: #4b4b4b;
  margin-bottom: 4px;
}

.value {
  font-size: 13px;
  font-weight: 700;
}

.prompt {
  font-size: 13px;
  font-style: italic;
  white-space: pre-wrap;
}

.muted { color: #777; font-size: 13px; }

.footer {
  margin-top: 20px;
  font-size: 10px;
  color: #777;
  display: flex;
  justify-content: space-between;
}

.footer .mark {
  color: #a4756f;
  font-weight: 700;
  letter-spacing: .08em;
}
"""


def escape_html(value) -> str:
    """Escape & < > " ' for safe interpolation. None becomes ""."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True).replace("&#x27;", "&#039;")


def logo_data_uri(path: Path) -> str | None:
    """Base64 data URI for the branding PNG, or None if it can't be read."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        logger.debug("No branding logo at %s", path)
        return None
    return "data:image/png;base64," + base64.b64encode(data).decode("ascii")


def _week_section(week: dict) -> str:
    return f"""
<section class="week">
  <div class="week-badge">Week {escape_html(week.get("week"))}</div>

  <div class="block">
    <div class="label">Practices</div>
    <div class="value">{escape_html(week.get("practices"))}</div>
  </div>

  <div class="block">
    <div class="label">Journal prompt</div>
    <div class="prompt">{escape_html(week.get("prompt"))}</div>
  </div>
</section>"""


def build_html(
    title: str,
    path_name: str,
    created_at: str,
    weeks: list[dict],
    logo: str | None = None,
) -> str:
    """Render the plan document.

    Args:
        title: Document heading and <title>
        path_name: Path label shown in the meta line
        created_at: Display timestamp
        weeks: Ordered week entries ({"week", "practices", "prompt"})
        logo: Optional data URI for the header image

    Returns:
        Complete HTML document string
    """
    if weeks:
        weeks_html = "".join(_week_section(w) for w in weeks)
    else:
        weeks_html = NO_DATA_HTML

    logo_html = f'<img src="{escape_html(logo)}" class="logo" alt="Aliven" />' if logo else ""

    return f"""<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<title>{escape_html(title)}</title>
<style>{PRINT_CSS}</style>
</head>

<body>
<div class="page">
  <div class="card">
    <div class="header">
      <div class="brand">Aliven Method</div>
      {logo_html}
    </div>

    <h1>{escape_html(title)}</h1>
    <div class="meta">
      Path: <strong>{escape_html(path_name)}</strong> &middot;
      Exported: <strong>{escape_html(created_at)}</strong>
    </div>

    {weeks_html}

    <div class="footer">
      <div class="mark">aliven</div>
      <div>Consistency beats intensity</div>
    </div>
  </div>
</div>
</body>
</html>"""
