from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Pages"])


ARIANA_PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Ariana Grande &mdash; Albums</title>
  <style>
    :root { --bg: #0b0b10; --card: #151520; --text: #f4f4f8; --muted: #b9b9c6; --accent: #9b81ff; --chip: #222232; }
    * { box-sizing: border-box; }
    body { margin: 0; font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Inter, Helvetica, Arial, sans-serif; background: radial-gradient(1200px 800px at 20% -10%, #1d1d2b 0%, #0b0b10 45%), #0b0b10; color: var(--text); }
    a { color: inherit; text-decoration: none; }
    .container { max-width: 1100px; margin: 0 auto; padding: 32px 20px 64px; }
    .header { display: flex; align-items: center; gap: 20px; }
    .avatar { width: 84px; height: 84px; border-radius: 18px; background: linear-gradient(145deg, #1b1b29, #0e0e16); box-shadow: 0 12px 24px rgba(0,0,0,0.4), inset 0 0 0 1px #2a2a3d; display: grid; place-items: center; font-weight: 800; letter-spacing: 0.5px; color: var(--accent); }
    .title { display: flex; flex-direction: column; gap: 6px; }
    .title h1 { margin: 0; font-size: 28px; }
    .title .meta { color: var(--muted); font-size: 14px; }
    .chips { display: flex; flex-wrap: wrap; gap: 8px; margin-top: 10px; }
    .chip { background: var(--chip); color: var(--muted); font-size: 12px; padding: 6px 10px; border-radius: 999px; border: 1px solid #2a2a3d; }
    .grid { display: grid; grid-template-columns: repeat(1, minmax(0, 1fr)); gap: 18px; margin-top: 26px; }
    @media (min-width: 560px) { .grid { grid-template-columns: repeat(2, 1fr); } }
    @media (min-width: 900px) { .grid { grid-template-columns: repeat(3, 1fr); } }
    .card { background: linear-gradient(145deg, #171726, #10101a); border: 1px solid #25253a; border-radius: 16px; padding: 16px; display: flex; flex-direction: column; gap: 10px; transition: transform .2s ease, box-shadow .2s ease; }
    .card:hover { transform: translateY(-2px); box-shadow: 0 16px 32px rgba(0,0,0,0.35); }
    .album-title { font-weight: 700; font-size: 16px; }
    .album-year { color: var(--muted); font-size: 13px; }
    .footer { margin-top: 36px; color: var(--muted); font-size: 13px; text-align: center; }
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <div class="avatar">AG</div>
      <div class="title">
        <h1>Ariana Grande</h1>
        <div class="meta">American singer, songwriter, and actress</div>
        <div class="chips">
          <span class="chip">Pop</span>
          <span class="chip">R&amp;B</span>
          <span class="chip">Vocal</span>
        </div>
      </div>
    </div>

    <div style="margin-top: 24px; font-size: 14px; color: var(--muted);">Studio albums</div>
    <div class="grid">
      <div class="card"><div class="album-title">Yours Truly</div><div class="album-year">2013</div></div>
      <div class="card"><div class="album-title">My Everything</div><div class="album-year">2014</div></div>
      <div class="card"><div class="album-title">Dangerous Woman</div><div class="album-year">2016</div></div>
      <div class="card"><div class="album-title">Sweetener</div><div class="album-year">2018</div></div>
      <div class="card"><div class="album-title">Thank U, Next</div><div class="album-year">2019</div></div>
      <div class="card"><div class="album-title">Positions</div><div class="album-year">2020</div></div>
      <div class="card"><div class="album-title">Eternal Sunshine</div><div class="album-year">2024</div></div>
    </div>

    <div class="footer">This is a static demo page served by the alert logger at /ariana.</div>
  </div>
</body>
</html>
"""


@router.get(
    "/ariana",
    response_class=HTMLResponse,
    summary="Ariana Grande page",
    description="Static HTML page listing Ariana Grande's studio albums.",
    operation_id="ariana_page",
)
def ariana_page() -> HTMLResponse:
    """Serve the static albums page."""
    return HTMLResponse(content=ARIANA_PAGE_HTML, status_code=200)
