"""Development runner.
Usage: python run.py  (create_app reads .env if present)
Set SPEC_GENERATION=v1 to serve the legacy merchants/wallet-transfer document.
"""

from __future__ import annotations

from api_docs import create_app

app = create_app()

if __name__ == "__main__":  # pragma: no cover
    import os
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5000"))
    app.run(debug=os.getenv("FLASK_DEBUG") == "1", host=host, port=port)
