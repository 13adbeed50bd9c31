from __future__ import annotations

import uvicorn

from loan_simulator.infra.config import server_host, server_port


def main() -> None:
    """Run the API with uvicorn (HOST / PORT from the environment)."""
    uvicorn.run(
        "loan_simulator.entrypoints.http.app:app",
        host=server_host(),
        port=server_port(),
        log_config=None,  # keep the logging set up by build_app()
    )
