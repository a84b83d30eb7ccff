# core/pages.py
# Static HTML for the two UI routes. The dashboard pulls its data from
# /api/namespaces and /api/objects in the browser.

_STYLE = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
           background-color: #f5f5f5; margin: 0; padding: 20px; }
    .card { background: white; padding: 24px; border-radius: 8px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
    h1 { color: #333; margin: 0; }
    label { display: block; margin-bottom: 5px; color: #555; font-weight: 500; }
    input { width: 100%; padding: 12px; border: 1px solid #ddd; border-radius: 4px;
            font-size: 16px; box-sizing: border-box; margin-bottom: 20px; }
    button, .btn { padding: 8px 16px; border: none; border-radius: 4px; cursor: pointer;
                   color: white; text-decoration: none; font-size: 14px; }
    .primary { background-color: #0066cc; width: 100%; padding: 12px; font-size: 16px; }
    .primary:hover { background-color: #0052a3; }
    .secondary { background-color: #6c757d; margin-bottom: 15px; }
    .danger { background-color: #dc3545; }
    .info { background-color: #e7f3ff; border: 1px solid #b3d7ff; padding: 15px;
            border-radius: 4px; margin: 20px 0; font-size: 14px; }
    .header { display: flex; justify-content: space-between; align-items: center;
              margin-bottom: 20px; }
    table { width: 100%; border-collapse: collapse; margin-top: 15px; }
    th, td { padding: 12px; text-align: left; border-bottom: 1px solid #ddd; }
    th { background-color: #f8f9fa; font-weight: 600; color: #555; }
    tr.clickable { cursor: pointer; color: #0066cc; }
    tr:hover { background-color: #f8f9fa; }
    .loading { text-align: center; padding: 40px; color: #666; }
    .error { background-color: #ffe6e6; border: 1px solid #ffcccc; color: #cc0000;
             padding: 15px; border-radius: 4px; margin: 15px 0; }
"""

_LOGIN_PAGE = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Durable Objects Viewer - Login</title>
  <style>{_STYLE}
    .card {{ max-width: 460px; margin: 50px auto; }}
  </style>
</head>
<body>
  <div class="card">
    <h1>Durable Objects Viewer</h1>
    <div class="info">
      You need a Cloudflare API token with <strong>Workers Scripts Read</strong> permission.
    </div>
    <form method="POST" action="/login">
      <label for="accountId">Account ID</label>
      <input type="text" id="accountId" name="accountId" required
             placeholder="e.g. 023e105f4ecef8ad9ca31a8372d0c353">
      <label for="apiKey">API Token</label>
      <input type="password" id="apiKey" name="apiKey" required placeholder="Your API token">
      <button type="submit" class="primary">Login</button>
    </form>
  </div>
</body>
</html>
"""

_DASHBOARD_PAGE = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Durable Objects Viewer</title>
  <style>{_STYLE}</style>
</head>
<body>
  <div class="card header">
    <h1>Durable Objects Viewer</h1>
    <a href="/logout" class="btn danger">Logout</a>
  </div>
  <div class="card"><div id="content"></div></div>
  <script>
    const content = document.getElementById('content');

    function esc(value) {{
      return String(value ?? '').replace(/[&<>"']/g, c => ({{
        '&': '&amp;', '<': '&lt;', '>': '&gt;', '"': '&quot;', "'": '&#39;'
      }})[c]);
    }}

    async function fetchJson(url) {{
      const response = await fetch(url, {{ credentials: 'same-origin' }});
      if (response.status === 401) {{ window.location.href = '/logout'; return null; }}
      if (!response.ok) throw new Error(await response.text());
      return response.json();
    }}

    async function loadNamespaces() {{
      content.innerHTML = '<div class="loading">Loading namespaces...</div>';
      try {{
        const namespaces = await fetchJson('/api/namespaces');
        if (namespaces) renderNamespaces(namespaces);
      }} catch (error) {{
        content.innerHTML = '<div class="error">' + esc(error.message) + '</div>';
      }}
    }}

    function renderNamespaces(namespaces) {{
      let html = '<h2>Durable Object Namespaces</h2>';
      if (namespaces.length === 0) {{
        content.innerHTML = html + '<p>No namespaces found.</p>';
        return;
      }}
      html += '<table><thead><tr><th>Name</th><th>ID</th><th>Class</th>'
        + '<th>Script</th><th>SQLite</th></tr></thead><tbody>';
      namespaces.forEach((ns, i) => {{
        html += '<tr class="clickable" data-index="' + i + '">'
          + '<td>' + esc(ns.name || 'N/A') + '</td>'
          + '<td>' + esc(ns.id) + '</td>'
          + '<td>' + esc(ns['class'] || 'N/A') + '</td>'
          + '<td>' + esc(ns.script || 'N/A') + '</td>'
          + '<td>' + (ns.use_sqlite ? 'Yes' : 'No') + '</td></tr>';
      }});
      content.innerHTML = html + '</tbody></table>';
      content.querySelectorAll('tr.clickable').forEach(row => {{
        const ns = namespaces[Number(row.dataset.index)];
        row.addEventListener('click', () => loadObjects(ns.id, ns.name || ns.id));
      }});
    }}

    async function loadObjects(namespaceId, namespaceName) {{
      content.innerHTML = '<div class="loading">Loading objects...</div>';
      try {{
        const objects = await fetchJson('/api/objects?namespaceId=' + encodeURIComponent(namespaceId));
        if (objects) renderObjects(objects, namespaceName);
      }} catch (error) {{
        content.innerHTML = '<div class="error">' + esc(error.message) + '</div>';
      }}
    }}

    function renderObjects(objects, namespaceName) {{
      let html = '<button class="secondary" id="back">&larr; Back to Namespaces</button>'
        + '<h2>Objects in Namespace: ' + esc(namespaceName) + '</h2>';
      if (objects.length === 0) {{
        html += '<p>No objects found in this namespace.</p>';
      }} else {{
        html += '<table><thead><tr><th>Object ID</th><th>Has Stored Data</th></tr></thead><tbody>';
        objects.forEach(obj => {{
          html += '<tr><td>' + esc(obj.id) + '</td><td>' + (obj.hasStoredData ? 'Yes' : 'No') + '</td></tr>';
        }});
        html += '</tbody></table>';
      }}
      content.innerHTML = html;
      document.getElementById('back').addEventListener('click', loadNamespaces);
    }}

    loadNamespaces();
  </script>
</body>
</html>
"""


def login_page() -> str:
    return _LOGIN_PAGE


def dashboard_page() -> str:
    return _DASHBOARD_PAGE
