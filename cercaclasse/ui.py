"""Static search page served at ``/cerca``.

The page queries ``/api/search`` 250 ms after the user stops typing, once
the trimmed input has at least 2 characters.
"""

SEARCH_PAGE = """<!doctype html>
<html lang="it">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Cerca la tua classe</title>
<style>
  body { margin: 0; background: #f8fafc; font-family: system-ui, sans-serif; color: #0f172a; }
  main { max-width: 48rem; margin: 0 auto; padding: 2rem 1.5rem; }
  input { width: 100%; box-sizing: border-box; padding: .75rem 1rem; font-size: 1rem;
          border: 1px solid #cbd5e1; border-radius: .75rem; }
  .card { margin-top: .75rem; padding: 1rem; background: #fff; border: 1px solid #e2e8f0; border-radius: .75rem; }
  .name { font-weight: 600; }
  .meta { margin-top: .25rem; font-size: .875rem; color: #334155; }
  .code { font-family: monospace; }
  .empty { margin-top: .75rem; font-size: .875rem; color: #334155; }
</style>
</head>
<body>
<main>
  <h1>Cerca la tua classe</h1>
  <p>Scrivi la scuola e il comune (es. <b>Carducci Roma</b>).</p>
  <input id="q" autocomplete="off" placeholder='Es: "einstein potenza", "da vinci", "PZIS022008"'>
  <div id="results"></div>
</main>
<script>
  const input = document.getElementById("q");
  const list = document.getElementById("results");
  let timer = null;

  function el(tag, cls, text) {
    const node = document.createElement(tag);
    if (cls) node.className = cls;
    if (text !== undefined) node.textContent = text;
    return node;
  }

  function render(results, canSearch) {
    list.replaceChildren();
    for (const r of results) {
      const card = el("div", "card");
      card.append(el("div", "name", r.scuola));
      card.append(el("div", "meta", `${r.comune} (${r.provincia}) · ${r.classe}`));
      const codes = el("div", "meta");
      codes.append("IST: ", el("span", "code", r.codiceIstituto), " · Codice scuola: ", el("span", "code", r.codiceScuola));
      card.append(codes);
      list.append(card);
    }
    if (canSearch && results.length === 0) {
      list.append(el("div", "empty",
        "Nessun risultato. Prova a scrivere anche il comune o il codice meccanografico."));
    }
  }

  input.addEventListener("input", () => {
    clearTimeout(timer);
    timer = setTimeout(async () => {
      const q = input.value.trim();
      if (q.length < 2) {
        render([], false);
        return;
      }
      const res = await fetch(`/api/search?q=${encodeURIComponent(q)}`);
      const json = await res.json();
      render(json.results || [], true);
    }, 250);
  });
</script>
</body>
</html>
"""
