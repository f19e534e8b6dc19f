"""Dashboard HTML page.

Loads billboard.js from a CDN; on page load it fetches /api/dashboard and
renders the summary and chart. A failed request leaves both panels empty.
"""

DASHBOARD_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>logdash</title>
  <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/billboard.js@3/dist/billboard.min.css">
  <script src="https://cdn.jsdelivr.net/npm/d3@7/dist/d3.min.js"></script>
  <script src="https://cdn.jsdelivr.net/npm/billboard.js@3/dist/billboard.min.js"></script>
</head>
<body>
  <pre id="stats"></pre>
  <div id="chart"></div>
  <script>
    window.onload = function () {
      fetch("/api/dashboard")
        .then(function (response) {
          if (!response.ok) {
            throw new Error("dashboard request failed: " + response.status);
          }
          return response.json();
        })
        .then(function (payload) {
          document.getElementById("stats").innerText = payload.summary_text;
          bb.generate(payload.chart_config);
        });
    };
  </script>
</body>
</html>
"""
