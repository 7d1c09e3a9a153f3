from __future__ import annotations
import argparse
import logging
import os
from dataclasses import asdict
from flask import Flask, request, jsonify, Response
from textsearch.engine import Engine
from textsearch import config as CFG

app = Flask(__name__)
_engine: Engine | None = None

log = logging.getLogger(__name__)

# ---------- API ----------
@app.get("/api/search")
def api_search():
    if _engine is None or not _engine.built:
        return jsonify({"error": "no document loaded"}), 503
    q = request.args.get("q", "", type=str)
    c = request.args.get("c", CFG.DEFAULT_CONTEXT_WORDS, type=int)
    if not q.strip():
        return jsonify([])
    if c < 0:
        return jsonify({"error": f"context must be >= 0, got {c}"}), 400
    rows = _engine.hits(q, c)
    return jsonify([asdict(r) for r in rows])

@app.get("/api/health")
def api_health():
    if _engine is None or not _engine.built:
        return jsonify({"ok": False}), 503
    return jsonify({"ok": True, **_engine.stats()})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Text Search • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0; flex-wrap:wrap; }
.controls input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); }
#q{ flex:1; min-width:240px; }
#c{ width:72px; text-align:center; }
.row{ padding:10px 14px; border-top:1px solid var(--border); white-space:pre-wrap; }
.small{ color:var(--muted); font-size:13px; }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Text Search</h1>
      <form id="form" class="controls">
        <input id="q" type="text" placeholder="Word to find…" autocomplete="off" autofocus />
        <label class="small">Context <input id="c" type="number" min="0" value="3" /></label>
      </form>
      <div id="stats" class="small">Ready.</div>
      <div id="out"></div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
function esc(s){ return s.replace(/[&<>"]/g, (ch)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[ch])); }
async function search(ev){
  if(ev) ev.preventDefault();
  const q = $("#q").value.trim(), c = Math.max(0, parseInt($("#c").value || "3", 10));
  if(!q){ $("#out").innerHTML = ""; $("#stats").textContent = "Ready."; return; }
  const resp = await fetch(`/api/search?q=${encodeURIComponent(q)}&c=${c}`);
  const data = await resp.json();
  if(!resp.ok){ $("#stats").textContent = `Error: ${data.error}`; return; }
  $("#stats").textContent = `Occurrences: ${data.length}`;
  $("#out").innerHTML = data.map((r)=>`<div class="row"><span class="small">#${r.ordinal + 1} @${r.position}</span> ${esc(r.context)}</div>`).join("");
}
$("#form").addEventListener("submit", search);
$("#c").addEventListener("change", search);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--file", required=True, help="Text file to index")
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["TEXTSEARCH_VERBOSE"] = "1"
        CFG.VERBOSE = True

    global _engine
    _engine = Engine.from_file(args.file)
    log.info("Serving %s on http://%s:%d", args.file, args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0
