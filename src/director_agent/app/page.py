INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Director Agent</title>
  <style>
    body { font-family: sans-serif; max-width: 760px; margin: 24px auto; padding: 0 12px; }
    textarea { width: 100%; height: 110px; font-size: 15px; box-sizing: border-box; }
    button { margin-top: 8px; padding: 10px 18px; font-size: 15px; cursor: pointer; }
    pre { margin-top: 16px; padding: 12px; background: #f5f5f5; white-space: pre-wrap; }
  </style>
</head>
<body>
  <h1>Director Agent</h1>
  <form id="ask">
    <textarea id="query" name="userQuery" placeholder="Ask anything..."></textarea>
    <button type="submit">Submit</button>
  </form>
  <pre id="response">Your response will appear here...</pre>
  <script>
    document.getElementById("ask").addEventListener("submit", async (event) => {
      event.preventDefault();
      const out = document.getElementById("response");
      out.textContent = "Processing your query...";
      try {
        const res = await fetch("/route-task", {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ userQuery: document.getElementById("query").value }),
        });
        out.textContent = JSON.stringify(await res.json(), null, 2);
      } catch (err) {
        out.textContent = "Error: " + err.message;
      }
    });
  </script>
</body>
</html>
"""
