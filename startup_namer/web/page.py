"""
Single-page form served at ``/``.
"""

from html import escape

from startup_namer.models import INDUSTRIES

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Startup Names by AI</title>
<style>
  body { font-family: system-ui, sans-serif; margin: 0; min-height: 100vh;
         background: linear-gradient(135deg, #f3e8ff, #c7d2fe);
         display: flex; flex-direction: column; align-items: center; padding: 1rem; }
  h1 { margin: 1.5rem 0 1rem; text-align: center; }
  .card { background: #fff; border-radius: 12px; padding: 1.5rem; width: 100%; max-width: 42rem;
          box-shadow: 0 4px 16px rgba(0, 0, 0, 0.08); box-sizing: border-box; }
  .intro { text-align: center; font-weight: 600; color: #1f2937; }
  label { display: block; margin: 1rem 0 0.35rem; font-weight: 500; }
  input, select, textarea { width: 100%; padding: 0.55rem; border: 1px solid #d1d5db;
                            border-radius: 6px; font: inherit; box-sizing: border-box; }
  button { width: 100%; margin-top: 1.25rem; padding: 0.7rem; border: 0; border-radius: 6px;
           background: #111827; color: #fff; font: inherit; cursor: pointer; }
  button:disabled { opacity: 0.6; cursor: progress; }
  .error { color: #ef4444; text-align: center; margin-top: 1rem; }
  ul { list-style: none; padding: 0; }
  li { background: #f9fafb; padding: 1rem; border-radius: 8px; margin-bottom: 0.75rem; }
  .name { font-weight: 700; font-size: 1.1rem; margin: 0 0 0.25rem; }
  .domain { font-size: 0.9rem; color: #4b5563; margin: 0; }
  .available { color: #22c55e; margin-left: 0.5rem; }
  .unavailable { color: #ef4444; margin-left: 0.5rem; }
  [hidden] { display: none; }
</style>
</head>
<body>
<h1>Startup Names by AI</h1>
<div class="card">
  <p class="intro">Find the perfect startup name with AI-powered Startup Namer, creating unique names
  tailored to your business and checking domain availability in real time.</p>
  <form id="namer-form">
    <label for="keywords">Enter keywords related to your startup</label>
    <input id="keywords" name="keywords" placeholder="Culinary, Gourmet, Organic">

    <label for="industry">Select your industry</label>
    <select id="industry" name="industry">
      <option value="">Select an industry</option>
      __INDUSTRY_OPTIONS__
    </select>

    <label for="targetAudience">Describe your target audience</label>
    <input id="targetAudience" name="targetAudience"
           placeholder="Example: Food lovers, health enthusiasts, aspiring chefs">

    <label for="companyValues">Describe your company values</label>
    <textarea id="companyValues" name="companyValues"
              placeholder="Example: Sustainability, Innovation, Customer-Centric Excellence"></textarea>

    <label for="companyDescription">Describe what your company does or what it sells</label>
    <textarea id="companyDescription" name="companyDescription"
              placeholder="Example: Premium culinary experiences, Organic gourmet products"></textarea>

    <button type="submit" id="generate">Generate Names</button>
  </form>

  <p class="error" id="error" hidden></p>

  <div id="results" hidden>
    <h3>Suggested Names:</h3>
    <ul id="suggestions"></ul>
    <button type="button" id="more">Generate More Names</button>
  </div>
</div>
<script>
(function () {
  const form = document.getElementById("namer-form");
  const generateBtn = document.getElementById("generate");
  const moreBtn = document.getElementById("more");
  const errorEl = document.getElementById("error");
  const results = document.getElementById("results");
  const list = document.getElementById("suggestions");

  function setLoading(loading) {
    generateBtn.disabled = loading;
    moreBtn.disabled = loading;
    generateBtn.textContent = loading ? "Generating Names..." : "Generate Names";
  }

  function showError(message) {
    errorEl.textContent = message;
    errorEl.hidden = !message;
  }

  function render(suggestions) {
    list.replaceChildren();
    for (const s of suggestions) {
      const item = document.createElement("li");
      const name = document.createElement("p");
      name.className = "name";
      name.textContent = s.name;
      const domain = document.createElement("p");
      domain.className = "domain";
      domain.textContent = "Domain: " + s.domain;
      const status = document.createElement("span");
      status.className = s.available ? "available" : "unavailable";
      status.textContent = s.available ? "Available" : "Unavailable";
      domain.appendChild(status);
      item.append(name, domain);
      list.appendChild(item);
    }
    results.hidden = suggestions.length === 0;
  }

  async function generate() {
    const data = Object.fromEntries(new FormData(form).entries());
    if (!(data.keywords || "").trim()) {
      showError("Please enter at least one keyword");
      return;
    }
    setLoading(true);
    showError("");
    try {
      const response = await fetch("/api/generate", {
        method: "POST",
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify(data),
      });
      const body = await response.json();
      if (!response.ok) {
        showError(body.error || "Failed to generate names or check domains. Please try again.");
        return;
      }
      render(body.suggestions);
    } catch (err) {
      showError("Failed to generate names or check domains. Please try again.");
    } finally {
      setLoading(false);
    }
  }

  form.addEventListener("submit", function (event) {
    event.preventDefault();
    generate();
  });
  moreBtn.addEventListener("click", generate);
})();
</script>
</body>
</html>
"""


def render_index() -> str:
    """Render the form page with the industry options filled in."""
    options = "\n      ".join(
        f'<option value="{escape(industry.lower())}">{escape(industry)}</option>'
        for industry in INDUSTRIES
    )
    return _PAGE_TEMPLATE.replace("__INDUSTRY_OPTIONS__", options)
