"""Standalone HTML pages served outside the LiveView (denial and staff QR)."""

from __future__ import annotations

from markupsafe import Markup, escape

_FONTS = Markup(
    '<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700'
    '&family=Space+Grotesk:wght@700&display=swap" rel="stylesheet"/>'
)

_BASE_STYLE = Markup(
    """
    *{box-sizing:border-box;margin:0;padding:0}
    body{background:#07091a;color:#e8edf7;font-family:'Inter',sans-serif;min-height:100vh;
      display:flex;align-items:center;justify-content:center;padding:24px}
    .card{background:rgba(255,255,255,0.04);border:1px solid rgba(255,255,255,0.1);
      border-radius:20px;padding:40px 32px;max-width:440px;width:100%;text-align:center;
      box-shadow:0 8px 40px rgba(0,0,0,0.5)}
    .logo{font-size:3rem;margin-bottom:10px}
    h1{font-family:'Space Grotesk',sans-serif;font-size:1.9rem;color:#60a5fa;margin-bottom:8px}
    p{color:#7a86a0;font-size:0.9rem;line-height:1.6;margin-bottom:20px}
    """
)


def _page(title: str, style: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8"/>
  <meta name="viewport" content="width=device-width,initial-scale=1"/>
  <title>{escape(title)}</title>
  {_FONTS}
  <style>{_BASE_STYLE}{style}</style>
</head>
<body>
  <div class="card">
{body}
  </div>
</body>
</html>"""


def access_denied_page(app_title: str = "TrainFresh") -> str:
    """Page shown to anyone who did not arrive through the QR link."""
    style = Markup(
        """
    .badge{display:inline-flex;gap:8px;background:rgba(239,68,68,0.12);
      border:1px solid rgba(239,68,68,0.3);color:#fca5a5;border-radius:50px;
      padding:8px 18px;font-size:0.82rem;font-weight:600;margin-bottom:24px}
    .scan-icon{font-size:2rem;margin-bottom:12px}
    .hint{font-size:0.78rem;color:#475569}
    """
    )
    body = f"""    <div class="logo">🚆</div>
    <h1>{escape(app_title)}</h1>
    <div class="badge">🔒 Access Restricted</div>
    <div class="scan-icon">📷</div>
    <p>This platform is only accessible to passengers on board.<br/>
    Please <strong>scan the QR code</strong> displayed in your coach to get access.</p>
    <p class="hint">QR codes are placed near each toilet compartment and at coach entrances.</p>"""
    return _page(f"{app_title} – Scan QR", style, body)


def invalid_code_page(message: str) -> str:
    """Short body for a rejected access link."""
    return f"<h3>{escape(message)}</h3>"


def admin_qr_page(
    qr_data_url: str,
    access_url: str,
    server_address: str,
    app_title: str = "TrainFresh",
) -> str:
    """Staff display with the QR code passengers scan."""
    style = Markup(
        """
    .qr-wrap{border-radius:16px;padding:12px;display:inline-block;
      border:2px solid rgba(59,130,246,0.3);margin-bottom:24px}
    .qr-wrap img{display:block;border-radius:8px}
    .instruction{color:#e8edf7;font-weight:600;margin-bottom:8px}
    .url-box{background:rgba(255,255,255,0.06);border:1px solid rgba(255,255,255,0.12);
      border-radius:10px;padding:10px 16px;font-size:0.72rem;color:#60a5fa;
      word-break:break-all;font-family:monospace;margin-bottom:16px}
    .badge-live{display:inline-flex;align-items:center;gap:6px;
      background:rgba(34,197,94,0.1);border:1px solid rgba(34,197,94,0.3);color:#4ade80;
      border-radius:50px;padding:5px 14px;font-size:0.76rem;font-weight:600}
    """
    )
    body = f"""    <div class="logo">🚆</div>
    <h1>{escape(app_title)}</h1>
    <p>Scan to check toilet availability</p>
    <div class="qr-wrap"><img src="{escape(qr_data_url)}" width="280" height="280" alt="QR Code"/></div>
    <p class="instruction">📱 Scan with your phone camera</p>
    <p>Open your camera app and point it at the QR code above.<br/>No app download needed.</p>
    <div class="url-box">{escape(access_url)}</div>
    <span class="badge-live">● Server Live on {escape(server_address)}</span>"""
    return _page(f"{app_title} – Staff QR Display", style, body)
