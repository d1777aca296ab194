"""Root route."""

from deps import APIRouter, HTMLResponse

router = APIRouter()

_ROOT_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Accessibility Report Normalizer API</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 42rem; margin: 2rem auto; padding: 0 1rem; }
    h1 { font-size: 1.25rem; font-weight: 600; }
    ul { list-style: none; padding: 0; }
    li { margin: 0.5rem 0; }
    a { color: #2563eb; text-decoration: none; }
    a:hover { text-decoration: underline; }
    .meta { color: #64748b; font-size: 0.875rem; margin-top: 1.5rem; }
  </style>
</head>
<body>
  <h1>Accessibility Report Normalizer API</h1>
  <p>Endpoints:</p>
  <ul>
    <li><a href="/docs">/docs</a> — Swagger UI</li>
    <li><a href="/redoc">/redoc</a> — ReDoc</li>
    <li><a href="/health">/health</a> — Liveness</li>
    <li><code>POST /normalize?wcag_level=AA&amp;view=issues</code> — Normalize a scan payload</li>
  </ul>
  <p class="meta">POST the raw scan result as JSON: <code>{"ruleEngineResult": {...}, "heuristicResult": {...}}</code>. See <a href="/docs">/docs</a> for details.</p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: welcome page with clickable links."""
    return _ROOT_HTML
